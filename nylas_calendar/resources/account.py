from nylas_calendar.core.attributes import Attributes
from nylas_calendar.core.restful_model import RestfulModel


class Account(RestfulModel):
    collection_name = "accounts"
    endpoint_name = "account"
    attributes = {
        **RestfulModel.attributes,
        "name": Attributes.String("name"),
        "email_address": Attributes.String("email_address"),
        "provider": Attributes.String("provider"),
        "organization_unit": Attributes.String("organization_unit"),
        "sync_state": Attributes.String("sync_state"),
        "billing_state": Attributes.String("billing_state"),
        "linked_at": Attributes.DateTime("linked_at"),
    }
