import sys

from contentgen.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
