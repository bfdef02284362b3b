"""
Application Layer for the FitTrack API.

This package contains:
- ports/: Abstract record store interface (what the domain needs)
- use_cases/: Submission pipeline and dashboard aggregation
- sessions/: Form sessions and dashboard views calling the use cases
- exceptions: Errors shared with the infrastructure layer
"""
