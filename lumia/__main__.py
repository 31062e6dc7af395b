import sys

from lumia.main import main

if __name__ == "__main__":
    sys.exit(main())
