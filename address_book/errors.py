#!/usr/bin/env python3
"""
Exceptions raised while loading the address book page.
"""


class AddressBookError(Exception):
    """Base class for every failure the page knows about."""


class NetworkError(AddressBookError):
    # Transport failure: connection refused, DNS failure, timeout, HTTP 4xx/5xx.
    pass


class DecodeError(AddressBookError):
    # The response body is not JSON or does not have the expected shape.
    pass
