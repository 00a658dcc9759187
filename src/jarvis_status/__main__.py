import sys

from .status_runner import main

if __name__ == "__main__":
    sys.exit(main())
