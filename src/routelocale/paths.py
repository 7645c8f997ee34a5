"""Path helpers: trailing-slash policy and index key joining."""

import posixpath


def adjust_trailing_slash(
    path: str,
    trailing_slash: bool | None,
    is_relative_child: bool = False,
) -> str:
    """Add or strip the trailing slash of *path* according to the router policy.

    ``None`` means no policy: the path is returned as is.  Otherwise
    trailing slashes are stripped and a single one is appended when
    *trailing_slash* is true.  A result that would be empty becomes ``/``
    unless the path belongs to a relative child, which must stay empty.

    Examples::

        adjust_trailing_slash("/about/", False)      -> "/about"
        adjust_trailing_slash("/about", True)        -> "/about/"
        adjust_trailing_slash("/", False)            -> "/"
        adjust_trailing_slash("team", True, True)    -> "team/"
    """
    if trailing_slash is None:
        return path
    adjusted = path.rstrip("/") + ("/" if trailing_slash else "")
    if adjusted:
        return adjusted
    return "" if is_relative_child else "/"


def join_paths(*parts: str) -> str:
    """Join and normalise URL path fragments.

    Unlike ``posixpath.join``, an absolute fragment does not discard what
    came before it: ``join_paths("/about", "/team")`` is ``/about/team``.
    A trailing slash on the last fragment is kept.  Joining nothing but
    empty fragments yields ``"."``.
    """
    joined = "/".join(part for part in parts if part)
    if not joined:
        return "."
    normalized = posixpath.normpath(joined)
    # normpath keeps exactly two leading slashes (POSIX allows it); URLs don't
    if normalized.startswith("//"):
        normalized = normalized[1:]
    if joined.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    return normalized
