# ptpublish

A command-line helper for preparing an upload to a private tracker. It
checks that the upload's files and screenshots exist, reads form fields
and HTTP headers given as query strings, and logs what it found. The
package also has a small HTTP client, query-string helpers, a cleanup
guard and a logging setup.

## Installation

```
pip install .
```

## Command-line use

```
publish-mteam -f movie.torrent -s shot1.png -s shot2.png \
    --data "name=My%20Upload&type=401" \
    --headers "User-Agent=ptpublish&Accept=application/json"
```

Options:

- `-f`, `--file`: one or more files for the upload. The option may be
  repeated. At least one file is needed, and each must exist.
- `-s`, `--screenshot`: one or more screenshots. The option may be
  repeated. At least one is needed, and each must exist.
- `--data`: form fields as a URL-encoded query string. It must not be
  empty.
- `--headers`: HTTP headers as a URL-encoded query string. Each decoded
  header is written to the log as `name=value`.

When every check passes the command prints `success` and exits with
status 0. When a check fails it logs a warning, prints
`parse command failed` and exits with status 255. Log output goes to
standard output and to `log/publish.log` (the `log` directory is created
when missing); the file rotates at 5 MiB and keeps three old copies.

The same command can be run as `python -m ptpublish.cli`.

### What the command does not do

The command stops after checking and logging its arguments. It does not
log in to a tracker, build an upload form or send anything over the
network.

## Library use

### Query strings

```python
from ptpublish.textutil import parse_query_string, trim, url_decode

parse_query_string("a=1&b=hello+world&flag")
# {'a': '1', 'b': 'hello world', 'flag': ''}

url_decode("http%3A%2F%2Fexample.com%2F")   # 'http://example.com/'
trim("  padded\t")                          # 'padded'
```

`url_decode` turns `%XX` escapes into bytes and `+` into a space, and
leaves malformed escapes as they are. In `parse_query_string` a later
key overwrites an earlier one, and a pair without `=` maps to `""`.
`trim` strips ASCII whitespace only.

### HTTP client

```python
from ptpublish.httpclient import Client, Method, Request, Timeout

with Client() as client:
    request = Request(url="https://example.com/", method=Method.GET,
                      timeout=Timeout(connect_timeout_ms=5000))
    request.add_header("Accept", "text/html")
    response = client.send(request)
    print(response.status_code, response.version, response.headers)
```

- `Request` has `url`, `method` (`Method.GET` or `Method.POST`),
  `headers`, `body`, `proxy` and `timeout`. For a POST the body is sent
  as UTF-8, with `Content-Type: application/x-www-form-urlencoded`
  unless a content type was given.
- `Timeout` holds `connect_timeout_ms` and `read_timeout_ms`, both
  10000 by default.
- `Proxy(proxy, username, password)` sends the request through a proxy,
  with the credentials placed in the proxy URL.
- `Response` has `status_code`, `version` (such as `HTTP/1.1`, or `""`
  when unknown), `headers` and `body` (decoded as UTF-8, with invalid
  bytes replaced).
- Redirects are not followed.
- A failed transfer raises `ptpublish.httpclient.HttpError`, a subclass
  of `RuntimeError`.

`split_header(line, delimiter)` splits a header line at the first
delimiter and trims the value; it returns `("", "")` when the delimiter
is empty or not found.

### Cleanup guard

`ptpublish.guard.Exit(func)` runs `func` once, either when `close()` is
called or when its `with` block ends, unless `cancel()` was called
first.

### Logging

`ptpublish.logsetup.init(name, filename)` sends root logging to standard
output and to a rotating file (5 MiB, three backups) and returns the
logger `name`. Calling it again replaces the handlers it installed
before. `new_log(name, filename)` returns a named logger that writes
only to its own rotating file (5 MiB, ten backups); later calls with the
same name return the same logger.

## Running the tests

```
pip install .[test]
pytest
```