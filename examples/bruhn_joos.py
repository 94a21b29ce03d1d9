#!/usr/bin/env python3
"""
Generate the proof that the square of the line graph of a graph of maximum
degree Delta has maximum degree at most 3/2 * Delta^2.
"""

from local_flags.proofs.bruhn_joos import main

if __name__ == "__main__":
    main()
