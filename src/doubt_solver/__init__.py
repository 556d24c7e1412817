"""doubt-solver: problem-scoped DSA tutoring chat gateway."""

__version__ = '0.1.0'
