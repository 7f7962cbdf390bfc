"""NexTask: onboarding slides and an in-memory To-Do list screen."""
