import sys

from phonicskit.cli import main

sys.exit(main())
