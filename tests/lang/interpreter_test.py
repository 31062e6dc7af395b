import io
import unittest
from unittest.mock import patch

from lumia.lang.interpreter import Interpreter
from lumia.lang.syntax import Identifier, Number, Show, StringLiteral


class InterpreterTestCase(unittest.TestCase):

    def test_render(self):
        cases = [
            (Show([StringLiteral("hello"), Number(42.0), Identifier("world")]), "hello 42 world"),
            (Show([]), ""),
            (Show([Number(1.0), Number(2.0), Number(3.0)]), "1 2 3"),
            (Show([Number(2.5), StringLiteral("")]), "2.5 "),
            (Show([StringLiteral("a b"), StringLiteral("c")]), "a b c"),
        ]
        for node, expected in cases:
            self.assertEqual(expected, Interpreter().render(node), node)

    def test_execute(self):
        stream = io.StringIO()
        interpreter = Interpreter(stream)

        interpreter.execute(Show([StringLiteral("hello"), Number(42.0), Identifier("world")]))
        interpreter.execute(Show([]))

        self.assertEqual("hello 42 world\n\n", stream.getvalue())

    def test_execute_stdout(self):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            Interpreter().execute(Show([Identifier("x")]))
        self.assertEqual("x\n", stdout.getvalue())

    def test_non_show_is_noop(self):
        stream = io.StringIO()
        for node in [StringLiteral("a"), Number(1.0), Identifier("x")]:
            Interpreter(stream).execute(node)
            self.assertIsNone(Interpreter().render(node))

        self.assertEqual("", stream.getvalue())

    def test_stateless(self):
        node = Show([Identifier("x"), Number(0.5)])
        interpreter = Interpreter()
        self.assertEqual(interpreter.render(node), interpreter.render(node))
        self.assertEqual(Interpreter().render(node), interpreter.render(node))


if __name__ == '__main__':
    unittest.main()
