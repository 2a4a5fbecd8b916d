"""Classification of webhook responses into delivery outcomes."""

from weworkbot.models import DeliveryOutcome, DeliveryStatus, WebhookResponse


def interpret_response(response: WebhookResponse) -> DeliveryOutcome:
    """Classify one POST result.

    * Any status other than 200 is a transport failure, whatever the body.
    * A 200 whose body could not be parsed is also a transport failure.
    * A 200 with ``errcode == 0`` is delivered; any other ``errcode`` is a
      rejection carrying ``errmsg`` verbatim.
    """
    if response.status_code != 200:
        detail = response.status_code if response.status_code is not None else response.error
        return DeliveryOutcome(status=DeliveryStatus.TRANSPORT_FAILED, detail=str(detail))

    envelope = response.envelope
    if envelope is None:
        return DeliveryOutcome(status=DeliveryStatus.TRANSPORT_FAILED, detail=response.error)
    if envelope.errcode == 0:
        return DeliveryOutcome(status=DeliveryStatus.DELIVERED)
    return DeliveryOutcome(status=DeliveryStatus.REJECTED, detail=envelope.errmsg)
