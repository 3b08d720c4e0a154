"""Base model shared by every calculator input and result."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CalculatorModel(BaseModel):
    """
    Immutable value object for calculator inputs and results.

    Attributes are snake_case in Python and camelCase on the wire
    (monthly_payment <-> "monthlyPayment"). Both spellings are accepted
    when validating input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
