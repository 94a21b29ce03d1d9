#!/usr/bin/env python3
"""
Sweep eta and print the sparsity bound for neighbourhoods in the square of
the line graph.
"""

from local_flags.proofs.strong_density import main

if __name__ == "__main__":
    main()
