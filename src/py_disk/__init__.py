"""PyDisk — a disk scheduling simulator.

Compares how FCFS, SCAN and C-SCAN order the same set of track
requests, and how far the disk head travels under each.
"""
