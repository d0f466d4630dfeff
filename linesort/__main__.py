import sys

from linesort.cli import main

sys.exit(main())
