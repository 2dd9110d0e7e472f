"""Courts app package.

The club's padel courts with their hourly price, plus the read endpoints
that answer "is this court free?" and "what does its day look like?".
"""
