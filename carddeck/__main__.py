import sys

from carddeck.cli import main

sys.exit(main())
