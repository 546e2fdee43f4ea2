import sys

from large_primes.cli import main

sys.exit(main())
