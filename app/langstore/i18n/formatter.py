"""Message formatting for parameterized translations.

The store hands a leaf template, its params and the effective locale to a
MessageFormatter. The default implementation uses ``str.format`` placeholder
syntax; a locale-aware formatter can be swapped in through the store or the
factory.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Tuple, Union

from langstore.i18n.exceptions import MessageFormatError
from langstore.logging import get_module_logger

logger = get_module_logger()

MessageParams = Union[Sequence[Any], Mapping[Any, Any]]


class MessageFormatter(ABC):
    """Abstract base for message formatters."""

    @abstractmethod
    def format(self, locale: str, template: str, params: MessageParams) -> str:
        """Interpolate params into a message template.

        Args:
            locale: Effective locale tag of the lookup.
            template: Message template.
            params: Positional (sequence) or named (mapping) arguments.

        Returns:
            The formatted message.

        Raises:
            MessageFormatError: If the template and params do not match.
        """
        pass


class StringMessageFormatter(MessageFormatter):
    """Formats messages with ``{0}`` positional and ``{name}`` named placeholders.

    A sequence is used positionally. A mapping supplies named arguments from
    its string keys and positional arguments from integer keys ``0..n``, so
    ``{0: "a", "who": "b"}`` fills both ``{0}`` and ``{who}``. ``{{`` and
    ``}}`` produce literal braces.
    """

    def format(self, locale: str, template: str, params: MessageParams) -> str:
        args, kwargs = self._split_params(params)

        try:
            return template.format(*args, **kwargs)
        except (KeyError, IndexError) as e:
            logger.error(
                "missing_message_param",
                locale=locale,
                template=template,
                param=str(e),
            )
            raise MessageFormatError(
                f"Missing message parameter {e} for template {template!r}"
            ) from e
        except ValueError as e:
            logger.error("invalid_message_template", locale=locale, template=template)
            raise MessageFormatError(
                f"Invalid message template {template!r}: {e}"
            ) from e

    @staticmethod
    def _split_params(params: MessageParams) -> Tuple[List[Any], Dict[str, Any]]:
        if isinstance(params, Mapping):
            kwargs = {k: v for k, v in params.items() if isinstance(k, str)}
            args = []
            while len(args) in params:
                args.append(params[len(args)])
            return args, kwargs

        if isinstance(params, (str, bytes)):
            return [params], {}

        return list(params), {}
