"""Simulations of operating-systems concepts: disk scheduling, paging, threads, processes and a tiny shell."""

__version__ = "0.1.0"