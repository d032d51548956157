"""
Core graph structures and algorithms.

This package contains the weighted undirected graph, the supporting data
structures (decrease-key priority queue, union-find) and the shortest path
and spanning tree algorithms built on them.
"""
