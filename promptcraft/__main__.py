import sys

from promptcraft.cli import main

sys.exit(main())
