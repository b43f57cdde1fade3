import sys

from ownedcopy.cli import main

sys.exit(main())
