"""Top-level package for the trip planner wizard.

This package exposes the pieces used to collect trip preferences,
validate them, request an itinerary from the generation service and
export the result: widgets, the screen state machine, the workflow
coordinators and the adapters that connect them to the outside world.
"""
