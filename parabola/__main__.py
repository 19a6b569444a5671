"""Run the game with ``python -m parabola``."""
import sys

from parabola.main import main

sys.exit(main())
