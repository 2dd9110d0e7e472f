"""Users app package.

Club members, registration, login and the JWT identity provider used by
the rest of the API to know who is making a request.
"""
