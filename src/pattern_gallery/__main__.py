"""Allow ``python -m pattern_gallery``."""
import sys

from pattern_gallery.cli.main import main

sys.exit(main())
