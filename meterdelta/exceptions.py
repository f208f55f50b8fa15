class MDError(Exception): ...


class IngestError(MDError): ...


class SampleFrameError(MDError): ...


class MonthKeyError(MDError, ValueError): ...


class AggregationError(MDError, ValueError): ...


def require(condition: bool, message: str, exc: type[MDError] = MDError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
