"""Internal subvertpy constants - keeps trivia out of public modules."""

from __future__ import annotations

import subvertpy

# Node kinds reported by check_path
NODE_NONE = subvertpy.NODE_NONE
NODE_FILE = subvertpy.NODE_FILE
NODE_DIR = subvertpy.NODE_DIR

# libsvn error numbers (svn_error_codes.h)
ERR_FS_NO_SUCH_REVISION = 160006
ERR_RA_NOT_AUTHORIZED = 170001
ERR_RA_DAV_FORBIDDEN = 175013
ERR_AUTHN_CREDS_UNAVAILABLE = 215000
ERR_AUTHN_FAILED = 215004

AUTH_ERRORS = frozenset(
    {
        ERR_RA_NOT_AUTHORIZED,
        ERR_RA_DAV_FORBIDDEN,
        ERR_AUTHN_CREDS_UNAVAILABLE,
        ERR_AUTHN_FAILED,
    }
)

# Revision properties
PROP_REVISION_AUTHOR = "svn:author"
PROP_REVISION_DATE = "svn:date"
PROP_REVISION_LOG = "svn:log"
