class SpanFilterAttributeNames:
    # Resource attribute that names the emitting service
    SERVICE_NAME: str = "service.name"
    # Log field holding an OpenTelemetry event name, as Jaeger exports it
    EVENT: str = "event"
    DEFAULT_SERVICE_NAME: str = "unknown_service"
