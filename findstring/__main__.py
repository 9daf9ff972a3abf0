import sys

from findstring.cli import main

sys.exit(main())
