"""Travelling-salesman problem generation, farthest insertion, local and tabu search."""