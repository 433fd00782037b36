import sys

from image_rotator.app import main

sys.exit(main())
