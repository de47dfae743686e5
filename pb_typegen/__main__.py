import sys

from pb_typegen.cli import main

sys.exit(main())
