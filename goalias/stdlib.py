"""Package names of the Go standard library.

A standard-library package is always named after the last element of its
import path, minus a trailing major-version element (``math/rand/v2`` is
package ``rand``).  Knowing the name lets an import be written without an
explicit alias.
"""

from __future__ import annotations

import re
from typing import FrozenSet, Optional

_VERSION_RE = re.compile(r"^v\d+$")

GO_STANDARD_PACKAGES: FrozenSet[str] = frozenset(
    {
        "archive/tar",
        "archive/zip",
        "bufio",
        "bytes",
        "cmp",
        "compress/bzip2",
        "compress/flate",
        "compress/gzip",
        "compress/lzw",
        "compress/zlib",
        "container/heap",
        "container/list",
        "container/ring",
        "context",
        "crypto",
        "crypto/aes",
        "crypto/cipher",
        "crypto/ecdsa",
        "crypto/ed25519",
        "crypto/hmac",
        "crypto/md5",
        "crypto/rand",
        "crypto/rsa",
        "crypto/sha1",
        "crypto/sha256",
        "crypto/sha512",
        "crypto/subtle",
        "crypto/tls",
        "crypto/x509",
        "database/sql",
        "database/sql/driver",
        "embed",
        "encoding",
        "encoding/base32",
        "encoding/base64",
        "encoding/binary",
        "encoding/csv",
        "encoding/hex",
        "encoding/json",
        "encoding/pem",
        "encoding/xml",
        "errors",
        "expvar",
        "flag",
        "fmt",
        "go/ast",
        "go/format",
        "go/parser",
        "go/printer",
        "go/token",
        "go/types",
        "hash",
        "hash/crc32",
        "hash/fnv",
        "html",
        "html/template",
        "image",
        "image/color",
        "image/png",
        "io",
        "io/fs",
        "iter",
        "log",
        "log/slog",
        "maps",
        "math",
        "math/big",
        "math/bits",
        "math/rand",
        "math/rand/v2",
        "mime",
        "mime/multipart",
        "net",
        "net/http",
        "net/http/httptest",
        "net/mail",
        "net/netip",
        "net/url",
        "os",
        "os/exec",
        "os/signal",
        "os/user",
        "path",
        "path/filepath",
        "reflect",
        "regexp",
        "runtime",
        "runtime/debug",
        "slices",
        "sort",
        "strconv",
        "strings",
        "sync",
        "sync/atomic",
        "syscall",
        "testing",
        "text/tabwriter",
        "text/template",
        "time",
        "unicode",
        "unicode/utf16",
        "unicode/utf8",
        "unsafe",
    }
)


def standard_package_name(path: str) -> Optional[str]:
    """Return the package name for a standard-library *path*, else None."""
    if path not in GO_STANDARD_PACKAGES:
        return None
    elements = path.split("/")
    if len(elements) > 1 and _VERSION_RE.match(elements[-1]):
        return elements[-2]
    return elements[-1]
