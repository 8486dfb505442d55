"""
Post-Parse Resolution.

Applies each argument's optional/default policy once scanning is done:

| observed | default | optional | result                      |
|----------|---------|----------|-----------------------------|
| some     | any     | any      | values stand as scanned     |
| none     | yes     | any      | [default]                   |
| none     | no      | yes      | [] (absence is acceptable)  |
| none     | no      | no       | MissingRequiredArgument     |
"""

from .schema import ArgDescriptor
from .table import ArgTable
from .errors import MissingRequiredArgument


def resolve_descriptor(descriptor: ArgDescriptor) -> None:
    if descriptor.values:
        return

    if descriptor.has_default:
        descriptor.add(descriptor.default)
        return

    if not descriptor.optional:
        raise MissingRequiredArgument(descriptor.display_name)


def resolve(table: ArgTable) -> None:
    """
    Finalize every descriptor in declaration order.

    Raises:
        MissingRequiredArgument: For the first required argument without a
            default that received no value.
    """
    for descriptor in table:
        resolve_descriptor(descriptor)
