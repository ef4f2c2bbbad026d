import sys

from pyiwd.cli import main

sys.exit(main())
