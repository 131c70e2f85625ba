"""Errors raised while talking to the Riot API or decoding its answers."""
from typing import Optional


class RiotAPIError(Exception):
    """Base class; ``message`` is the text shown to the user."""

    message = "Riot API request failed"

    def __init__(self, message: Optional[str] = None, *, url: Optional[str] = None):
        self.message = message or self.message
        self.url = url
        super().__init__(self.message)


class AccountNotFound(RiotAPIError):
    message = "Account does not exist."


class NotCurrentlyInMatch(RiotAPIError):
    message = "Summoner is not in game."


class NoMatchHistory(RiotAPIError):
    message = "No history available."


class MatchNotFound(RiotAPIError):
    message = "Match does not exist."


class MalformedResponse(RiotAPIError):
    message = "Error deserializing JSON."


class TransportFailure(RiotAPIError):
    message = "Request could not be sent."


class RequestTimeout(TransportFailure):
    message = "Request timed out."


class UnexpectedStatus(RiotAPIError):
    """Any HTTP status other than the endpoint's documented 200/404."""

    def __init__(self, status_code: int, *, url: Optional[str] = None):
        self.status_code = status_code
        super().__init__(f"Unexpected response status {status_code}.", url=url)
