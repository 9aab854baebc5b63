import sys

from eight_queens.queens import main

sys.exit(main())
