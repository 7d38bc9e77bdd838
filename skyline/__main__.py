import sys

from skyline.main import main

sys.exit(main())
