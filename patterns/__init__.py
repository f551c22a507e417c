"""Pattern-based implementations of the demo scenarios.

Each module demonstrates one self-contained design pattern on a small
business scenario: a singleton database connection, an HTTP request
builder, three flavours of OTP sender factory, payment strategies, drink
decorators, a weather-station observer and a vending-machine state machine.
The naive counterparts live in the ``naive`` package.
"""
