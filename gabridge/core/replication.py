"""Fan a translated command out to additional tracking accounts."""

import logging
from typing import List, Union

from gabridge.core.config import USER_ID_TOGGLE, GoogleAnalyticsSettings, HitType
from gabridge.core.hits import Command

logger = logging.getLogger(__name__)


def replicate(
    command: Command,
    hit_type: Union[HitType, str],
    settings: GoogleAnalyticsSettings,
) -> List[Command]:
    """Copy ``command`` to every additional account when its hit type is enabled.

    The primary command always comes first and is returned as given. Each
    copy is deep-independent, addressed as ``"<account>.<command>"`` and, unless
    the ``userId`` toggle is on, has ``userId`` removed from its field bags.
    Accounts are visited in list order; duplicate names each get a copy.

    Args:
        command: The translated primary command.
        hit_type: The hit type whose toggle gates replication.
        settings: Read at call time.

    Returns:
        The primary command followed by one copy per additional account.
    """
    key = hit_type.value if isinstance(hit_type, HitType) else hit_type
    if not settings.should_copy(key):
        return [command]

    strip_user_id = not settings.should_copy(USER_ID_TOGGLE)
    commands = [command]
    for account_name in settings.additional_account_names:
        replica = command.namespaced(account_name)
        if strip_user_id:
            for bag in replica.field_bags():
                bag.pop("userId", None)
        commands.append(replica)

    if len(commands) > 1:
        logger.debug("Replicated '%s' to %d additional accounts", command.name, len(commands) - 1)
    return commands
