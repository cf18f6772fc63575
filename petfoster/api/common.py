from fastapi import Request

from petfoster.schemas.query import QueryDescriptor
from petfoster.services.query_translator import LIST_SEPARATOR, parse_query_params


def get_query_descriptor(request: Request) -> QueryDescriptor:
    # Repeated keys arrive comma-joined, so ?species__in=cat&species__in=dog
    # reads the same as ?species__in=cat,dog.
    params = request.query_params
    raw = {key: LIST_SEPARATOR.join(params.getlist(key)) for key in params.keys()}
    return parse_query_params(raw)
