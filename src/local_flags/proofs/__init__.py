"""Proof programs: each module builds one flag-algebra problem and solves it with CSDP."""
