"""ConfigureLog v1: location of the cmake-configure-log(7) file."""

from __future__ import annotations

from typing import ClassVar

from cmake_file_api.objects.base import ObjectKind, ReplyObject


class ConfigureLog(ReplyObject, frozen=True):
    """The ``configureLog`` object, major version 1.

    Clients must read the log from ``path``; the file may not exist when no
    events were logged.
    """

    KIND: ClassVar[ObjectKind] = ObjectKind.CONFIGURE_LOG
    MAJOR: ClassVar[int] = 1

    path: str = ""
    event_kind_names: tuple[str, ...] = ()


__all__ = ["ConfigureLog"]
