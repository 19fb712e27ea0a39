# -*- coding: utf-8 -*-
"""
Status Catalog - the static table of HTTP status codes

The table is literal data defined once at import time. A duplicate code is an
authoring mistake and makes the import fail; there is no runtime validation
beyond that.

Usage:
    from core.catalog import get_catalog

    catalog = get_catalog()
    record = catalog.get(404)
    for category, records in catalog.grouped().items():
        ...
"""
from typing import Dict, Iterable, Iterator, List, Optional

from core.models import Category, StatusRecord

C = Category

# Codes outside 100..599 get their category by convention, not by range
VENDOR_CATEGORY_OVERRIDES: Dict[int, Category] = {
    999: C.CLIENT_ERROR,   # LinkedIn
}


HTTP_STATUS_CODES = (
    # 1xx Informational
    StatusRecord(100, "Continue", C.INFORMATIONAL, True,
                 "The server has received the request headers and the client should proceed to send the request body."),
    StatusRecord(101, "Switching Protocols", C.INFORMATIONAL, True,
                 "The requester has asked the server to switch protocols and the server has agreed to do so."),
    StatusRecord(102, "Processing", C.INFORMATIONAL, True,
                 "The server has received and is processing the request, but no response is available yet (WebDAV)."),
    StatusRecord(103, "Early Hints", C.INFORMATIONAL, True,
                 "Used to return some response headers before the final HTTP message, so the client can start preloading resources."),

    # 2xx Success
    StatusRecord(200, "OK", C.SUCCESS, True,
                 "Standard response for successful HTTP requests."),
    StatusRecord(201, "Created", C.SUCCESS, True,
                 "The request has been fulfilled, resulting in the creation of a new resource."),
    StatusRecord(202, "Accepted", C.SUCCESS, True,
                 "The request has been accepted for processing, but the processing has not been completed."),
    StatusRecord(203, "Non-Authoritative Information", C.SUCCESS, True,
                 "The server is a transforming proxy that received a 200 OK from its origin but is returning a modified version of the response."),
    StatusRecord(204, "No Content", C.SUCCESS, True,
                 "The server successfully processed the request and is not returning any content."),
    StatusRecord(205, "Reset Content", C.SUCCESS, True,
                 "The server successfully processed the request and asks the requester to reset its document view."),
    StatusRecord(206, "Partial Content", C.SUCCESS, True,
                 "The server is delivering only part of the resource because of a range header sent by the client."),
    StatusRecord(207, "Multi-Status", C.SUCCESS, True,
                 "The message body is an XML message that can contain a number of separate response codes (WebDAV)."),
    StatusRecord(208, "Already Reported", C.SUCCESS, True,
                 "The members of a DAV binding have already been enumerated in a preceding part of the response (WebDAV)."),
    StatusRecord(218, "This is fine", C.SUCCESS, False,
                 "Used by Apache servers as a catch-all error condition allowing response bodies to flow through when ProxyErrorOverride is enabled."),
    StatusRecord(226, "IM Used", C.SUCCESS, True,
                 "The server has fulfilled a GET request and the response is a representation of one or more instance-manipulations applied to the current instance."),

    # 3xx Redirection
    StatusRecord(300, "Multiple Choices", C.REDIRECTION, True,
                 "Indicates multiple options for the resource from which the client may choose."),
    StatusRecord(301, "Moved Permanently", C.REDIRECTION, True,
                 "This and all future requests should be directed to the given URI."),
    StatusRecord(302, "Found", C.REDIRECTION, True,
                 "Tells the client to look at another URL; the resource is temporarily located elsewhere."),
    StatusRecord(303, "See Other", C.REDIRECTION, True,
                 "The response to the request can be found under another URI using the GET method."),
    StatusRecord(304, "Not Modified", C.REDIRECTION, True,
                 "The resource has not been modified since the version specified by the request headers."),
    StatusRecord(305, "Use Proxy", C.REDIRECTION, True,
                 "The requested resource is available only through a proxy. Deprecated for security reasons."),
    StatusRecord(306, "Switch Proxy", C.REDIRECTION, True,
                 "No longer used. Originally meant that subsequent requests should use the specified proxy."),
    StatusRecord(307, "Temporary Redirect", C.REDIRECTION, True,
                 "The request should be repeated with another URI, and the request method must not be changed."),
    StatusRecord(308, "Permanent Redirect", C.REDIRECTION, True,
                 "This and all future requests should be directed to the given URI, without changing the request method."),

    # 4xx Client Errors
    StatusRecord(400, "Bad Request", C.CLIENT_ERROR, True,
                 "The server cannot process the request due to an apparent client error."),
    StatusRecord(401, "Unauthorized", C.CLIENT_ERROR, True,
                 "Authentication is required and has failed or has not yet been provided."),
    StatusRecord(402, "Payment Required", C.CLIENT_ERROR, True,
                 "Reserved for future use; sometimes used by services to signal that payment is needed."),
    StatusRecord(403, "Forbidden", C.CLIENT_ERROR, True,
                 "The request contained valid data but the server is refusing action."),
    StatusRecord(404, "Not Found", C.CLIENT_ERROR, True,
                 "The requested resource could not be found but may be available in the future."),
    StatusRecord(405, "Method Not Allowed", C.CLIENT_ERROR, True,
                 "A request method is not supported for the requested resource."),
    StatusRecord(406, "Not Acceptable", C.CLIENT_ERROR, True,
                 "The requested resource can only generate content not acceptable according to the Accept headers sent in the request."),
    StatusRecord(407, "Proxy Authentication Required", C.CLIENT_ERROR, True,
                 "The client must first authenticate itself with the proxy."),
    StatusRecord(408, "Request Timeout", C.CLIENT_ERROR, True,
                 "The server timed out waiting for the request."),
    StatusRecord(409, "Conflict", C.CLIENT_ERROR, True,
                 "The request could not be processed because of a conflict in the current state of the resource."),
    StatusRecord(410, "Gone", C.CLIENT_ERROR, True,
                 "The resource requested was previously in use but is no longer available and will not be available again."),
    StatusRecord(411, "Length Required", C.CLIENT_ERROR, True,
                 "The request did not specify the length of its content, which is required by the requested resource."),
    StatusRecord(412, "Precondition Failed", C.CLIENT_ERROR, True,
                 "The server does not meet one of the preconditions that the requester put on the request header fields."),
    StatusRecord(413, "Content Too Large", C.CLIENT_ERROR, True,
                 "The request is larger than the server is willing or able to process."),
    StatusRecord(414, "URI Too Long", C.CLIENT_ERROR, True,
                 "The URI provided was too long for the server to process."),
    StatusRecord(415, "Unsupported Media Type", C.CLIENT_ERROR, True,
                 "The request entity has a media type which the server or resource does not support."),
    StatusRecord(416, "Range Not Satisfiable", C.CLIENT_ERROR, True,
                 "The client has asked for a portion of the file, but the server cannot supply that portion."),
    StatusRecord(417, "Expectation Failed", C.CLIENT_ERROR, True,
                 "The server cannot meet the requirements of the Expect request-header field."),
    StatusRecord(418, "I'm a teapot", C.CLIENT_ERROR, False,
                 "Defined in 1998 as an April Fools' joke (RFC 2324). The server refuses to brew coffee because it is, permanently, a teapot."),
    StatusRecord(419, "Page Expired", C.CLIENT_ERROR, False,
                 "Used by the Laravel Framework when a CSRF token is missing or expired."),
    StatusRecord(420, "Enhance Your Calm", C.CLIENT_ERROR, False,
                 "Returned by version 1 of the Twitter Search and Trends API when the client is being rate limited."),
    StatusRecord(421, "Misdirected Request", C.CLIENT_ERROR, True,
                 "The request was directed at a server that is not able to produce a response."),
    StatusRecord(422, "Unprocessable Content", C.CLIENT_ERROR, True,
                 "The request was well-formed but was unable to be followed due to semantic errors."),
    StatusRecord(423, "Locked", C.CLIENT_ERROR, True,
                 "The resource that is being accessed is locked (WebDAV)."),
    StatusRecord(424, "Failed Dependency", C.CLIENT_ERROR, True,
                 "The request failed because it depended on another request and that request failed (WebDAV)."),
    StatusRecord(425, "Too Early", C.CLIENT_ERROR, True,
                 "The server is unwilling to risk processing a request that might be replayed."),
    StatusRecord(426, "Upgrade Required", C.CLIENT_ERROR, True,
                 "The client should switch to a different protocol such as TLS/1.3, given in the Upgrade header field."),
    StatusRecord(428, "Precondition Required", C.CLIENT_ERROR, True,
                 "The origin server requires the request to be conditional, to prevent the lost update problem."),
    StatusRecord(429, "Too Many Requests", C.CLIENT_ERROR, True,
                 "The user has sent too many requests in a given amount of time. Intended for use with rate-limiting schemes."),
    StatusRecord(430, "Request Header Fields Too Large", C.CLIENT_ERROR, False,
                 "Used by Shopify instead of 429 when too many URLs are requested within a certain time frame."),
    StatusRecord(431, "Request Header Fields Too Large", C.CLIENT_ERROR, True,
                 "The server is unwilling to process the request because either an individual header field, or all the header fields collectively, are too large."),
    StatusRecord(440, "Login Time-out", C.CLIENT_ERROR, False,
                 "Microsoft IIS: the client's session has expired and must log in again."),
    StatusRecord(444, "No Response", C.CLIENT_ERROR, False,
                 "nginx: the server returns no information to the client and closes the connection."),
    StatusRecord(449, "Retry With", C.CLIENT_ERROR, False,
                 "Microsoft IIS: the server cannot honour the request because the user has not provided the required information."),
    StatusRecord(450, "Blocked by Windows Parental Controls", C.CLIENT_ERROR, False,
                 "Microsoft: Windows Parental Controls are turned on and are blocking access to the requested webpage."),
    StatusRecord(451, "Unavailable For Legal Reasons", C.CLIENT_ERROR, True,
                 "A server operator has received a legal demand to deny access to a resource or to a set of resources that includes the requested resource."),
    StatusRecord(460, "Client Closed Connection", C.CLIENT_ERROR, False,
                 "AWS Elastic Load Balancing: the client closed the connection with the load balancer before the idle timeout period elapsed."),
    StatusRecord(463, "Too Many Forwarded IP Addresses", C.CLIENT_ERROR, False,
                 "AWS Elastic Load Balancing: the load balancer received an X-Forwarded-For request header with more than 30 IP addresses."),
    StatusRecord(494, "Request Header Too Large", C.CLIENT_ERROR, False,
                 "nginx: the client sent too large of a request or header line that is too long."),
    StatusRecord(495, "SSL Certificate Error", C.CLIENT_ERROR, False,
                 "nginx: the client has provided an invalid client certificate."),
    StatusRecord(496, "SSL Certificate Required", C.CLIENT_ERROR, False,
                 "nginx: a client certificate is required but not provided."),
    StatusRecord(497, "HTTP Request Sent to HTTPS Port", C.CLIENT_ERROR, False,
                 "nginx: the client has made a HTTP request to a port listening for HTTPS requests."),
    StatusRecord(498, "Invalid Token", C.CLIENT_ERROR, False,
                 "Esri: an expired or otherwise invalid token."),
    StatusRecord(499, "Client Closed Request", C.CLIENT_ERROR, False,
                 "nginx: the client has closed the request before the server could send a response."),

    # 5xx Server Errors
    StatusRecord(500, "Internal Server Error", C.SERVER_ERROR, True,
                 "A generic error message, given when an unexpected condition was encountered and no more specific message is suitable."),
    StatusRecord(501, "Not Implemented", C.SERVER_ERROR, True,
                 "The server either does not recognize the request method, or it lacks the ability to fulfil the request."),
    StatusRecord(502, "Bad Gateway", C.SERVER_ERROR, True,
                 "The server was acting as a gateway or proxy and received an invalid response from the upstream server."),
    StatusRecord(503, "Service Unavailable", C.SERVER_ERROR, True,
                 "The server cannot handle the request because it is overloaded or down for maintenance."),
    StatusRecord(504, "Gateway Timeout", C.SERVER_ERROR, True,
                 "The server was acting as a gateway or proxy and did not receive a timely response from the upstream server."),
    StatusRecord(505, "HTTP Version Not Supported", C.SERVER_ERROR, True,
                 "The server does not support the HTTP version used in the request."),
    StatusRecord(506, "Variant Also Negotiates", C.SERVER_ERROR, True,
                 "Transparent content negotiation for the request results in a circular reference."),
    StatusRecord(507, "Insufficient Storage", C.SERVER_ERROR, True,
                 "The server is unable to store the representation needed to complete the request (WebDAV)."),
    StatusRecord(508, "Loop Detected", C.SERVER_ERROR, True,
                 "The server detected an infinite loop while processing the request (WebDAV)."),
    StatusRecord(509, "Bandwidth Limit Exceeded", C.SERVER_ERROR, False,
                 "Apache Web Server / cPanel: the server has exceeded the bandwidth specified by the server administrator."),
    StatusRecord(510, "Not Extended", C.SERVER_ERROR, True,
                 "Further extensions to the request are required for the server to fulfil it."),
    StatusRecord(511, "Network Authentication Required", C.SERVER_ERROR, True,
                 "The client needs to authenticate to gain network access. Intended for use by intercepting proxies."),
    StatusRecord(520, "Web Server Returned an Unknown Error", C.SERVER_ERROR, False,
                 "Cloudflare: the origin server returned an empty, unknown, or unexpected response."),
    StatusRecord(521, "Web Server Is Down", C.SERVER_ERROR, False,
                 "Cloudflare: the origin server refused connections from Cloudflare."),
    StatusRecord(522, "Connection Timed Out", C.SERVER_ERROR, False,
                 "Cloudflare: Cloudflare timed out contacting the origin server."),
    StatusRecord(523, "Origin Is Unreachable", C.SERVER_ERROR, False,
                 "Cloudflare: Cloudflare could not reach the origin server."),
    StatusRecord(524, "A Timeout Occurred", C.SERVER_ERROR, False,
                 "Cloudflare: Cloudflare made a TCP connection to the origin but did not receive a timely HTTP response."),
    StatusRecord(525, "SSL Handshake Failed", C.SERVER_ERROR, False,
                 "Cloudflare: Cloudflare could not negotiate a SSL/TLS handshake with the origin server."),
    StatusRecord(526, "Invalid SSL Certificate", C.SERVER_ERROR, False,
                 "Cloudflare: Cloudflare could not validate the SSL certificate on the origin web server."),
    StatusRecord(527, "Railgun Error", C.SERVER_ERROR, False,
                 "Cloudflare: the connection between Cloudflare and the origin's Railgun server was interrupted."),
    StatusRecord(529, "Site is overloaded", C.SERVER_ERROR, False,
                 "Qualys SSLLabs: the site cannot process the request."),
    StatusRecord(530, "Site is frozen", C.SERVER_ERROR, False,
                 "Pantheon: the site has been frozen due to inactivity."),
    StatusRecord(561, "Unauthorized", C.SERVER_ERROR, False,
                 "AWS Elastic Load Balancing: the identity provider returned an error code when authenticating the user."),
    StatusRecord(598, "Network Read Timeout Error", C.SERVER_ERROR, False,
                 "Used by some HTTP proxies to signal a network read timeout behind the proxy to a client in front of the proxy."),
    StatusRecord(599, "Network Connect Timeout Error", C.SERVER_ERROR, False,
                 "Used by some HTTP proxies to signal a network connect timeout behind the proxy to a client in front of the proxy."),

    # Outside the standard ranges
    StatusRecord(999, "Request Denied", VENDOR_CATEGORY_OVERRIDES[999], False,
                 "LinkedIn: returned when the client is suspected of scraping or when requests are denied."),
)


class StatusCatalog:
    """Read-only, ordered collection of StatusRecord with lookup by code"""

    def __init__(self, records: Iterable[StatusRecord]):
        self._records: List[StatusRecord] = list(records)
        self._by_code: Dict[int, StatusRecord] = {}
        for record in self._records:
            if record.code in self._by_code:
                raise ValueError(f"duplicate status code {record.code}")
            self._by_code[record.code] = record

    def get(self, code: int) -> Optional[StatusRecord]:
        return self._by_code.get(code)

    def __getitem__(self, code: int) -> StatusRecord:
        return self._by_code[code]

    def __contains__(self, code) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[StatusRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def codes(self) -> List[int]:
        return [r.code for r in self._records]

    def by_category(self, category: Category) -> List[StatusRecord]:
        return [r for r in self._records if r.category == category]

    def grouped(self) -> Dict[Category, List[StatusRecord]]:
        """Records grouped by category, in category order, empty groups omitted.

        This is the shape the page renderer iterates to build its sections.
        """
        groups: Dict[Category, List[StatusRecord]] = {}
        for category in Category:
            records = self.by_category(category)
            if records:
                groups[category] = records
        return groups

    def official_only(self) -> List[StatusRecord]:
        return [r for r in self._records if r.official]

    def unofficial_only(self) -> List[StatusRecord]:
        return [r for r in self._records if not r.official]

    def __repr__(self):
        return f"StatusCatalog({len(self._records)} codes)"


# Default catalog instance
catalog = StatusCatalog(HTTP_STATUS_CODES)


def get_catalog() -> StatusCatalog:
    """Return the default catalog"""
    return catalog
