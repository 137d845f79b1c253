"""
Move-selection agents for the 2584 Fibonacci sliding-tile puzzle.
"""
