import sys

from chessarbiter.app import main

sys.exit(main())
