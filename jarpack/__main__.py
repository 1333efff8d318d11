import sys

from jarpack.cli import main

sys.exit(main())
