#!/usr/bin/env python3
"""
Generate the proof that a graph of maximum degree Delta whose line graph
squared is a clique has at most 5/4 * Delta^2 edges.
"""

from local_flags.proofs.strong_complete import main

if __name__ == "__main__":
    main()
