"""
Feature modules.

- route: route-building state machine
- workouts: workout model, store and GPX export
- session: controller wiring both to the UI collaborators
"""
