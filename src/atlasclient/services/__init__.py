"""Resource services built on the executor and the response cache."""

from atlasclient.services.base import BaseService
from atlasclient.services.content import ContentQuery, ContentService
from atlasclient.services.locations import LocationQuery, LocationService
from atlasclient.services.people import PeopleService, PersonQuery
from atlasclient.services.publications import PublicationQuery, PublicationService
from atlasclient.services.websites import WebsiteQuery, WebsiteService

__all__ = [
    "BaseService",
    "ContentQuery",
    "ContentService",
    "LocationQuery",
    "LocationService",
    "PeopleService",
    "PersonQuery",
    "PublicationQuery",
    "PublicationService",
    "WebsiteQuery",
    "WebsiteService",
]
