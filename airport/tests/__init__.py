"""Test suite for the airport simulation.

Organized into three categories:

1. core/: Unit tests for each core component
   - Collaborators replaced with in-memory fakes from tests/fakes/

2. fakes/: Port implementations for testing
   - Stubs and spies for RandomSourcePort, WeatherPort, AirportPort

3. Top level: feature tests driving real components end to end,
   and composition root tests for configuration and wiring
"""
