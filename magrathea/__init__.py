"""Console tools for the Magrathea trainee programme: splash, introductions,
candidates, judges, an Easter egg, training stages, fitness, mentoring and
counseling."""

__version__ = "0.1.0"