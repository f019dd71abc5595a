"""meetingmeter — what is this meeting costing us?

Turns an hourly rate (or the sum of every participant's rate) and a meeting
length into money. Shows the cost once for a fixed-length meeting, or ticks
a running total until the meeting ends.

Usage:
    python -m meetingmeter --rate 150 --duration 1h          # One-shot cost
    python -m meetingmeter --rate 150 --duration 1h --ticks 5s
    python -m meetingmeter                                   # Ask for rates, tick until Q
"""
