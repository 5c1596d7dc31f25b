# docsearch

docsearch is a small in-memory full-text search library. Each document is one
line of words separated by spaces. The words of a query are looked up in an
inverted index. Documents are ranked by their total hit count and the top five
are reported.

## Installation

```
pip install .
```

## Usage

```python
import io
from docsearch.search_server import SearchServer

docs = io.StringIO("london is the capital of great britain\nparis is the capital of france\n")
with SearchServer(docs) as server:
    out = io.StringIO()
    server.add_queries_stream(io.StringIO("the capital\n"), out)
    server.wait()
    print(out.getvalue())
# the capital: {docid: 0, hitcount: 2} {docid: 1, hitcount: 2}
```

### `docsearch.search_server`

- `SearchServer(document_input=None)` creates a server. If it is given an
  iterable of lines, such as an open text stream, it builds the index from them.
- `SearchServer.update_document_base(stream)` replaces the index with a new one
  built from the stream, one document per line. Document ids start at 0 and
  follow line order. The new index is swapped in under a lock, so a query stream
  that is already running can keep going.
- `SearchServer.search(query)` returns up to five `(docid, hitcount)` pairs for
  a single query. The highest hit count comes first. When hit counts are equal,
  the lower document id comes first. Words in a query are separated by runs of
  spaces.
- `SearchServer.add_queries_stream(queries, output)` answers each query line on
  a background thread. For every query it writes one line to `output`, in the
  form `query: {docid: N, hitcount: M} ...`. It returns a
  `concurrent.futures.Future`.
- `SearchServer.wait()` blocks until every pending query stream has finished.
  It re-raises the first error that any of them raised. Leaving a `with` block
  also waits, and then shuts down the worker threads.
- `split_into_words(line)` splits a line on spaces and drops empty words.
- `InvertedIndex` gives direct access to the index:
  - `add(document)` adds a document under the next id.
  - `lookup(word)` returns `(docid, count)` pairs in document order.
  - `get_document(docid)` returns the text of a document.

`update_document_base` and each query stream write a timing report to standard
error.

### `docsearch.parse`

- `strip(s)` removes leading and trailing ASCII whitespace.
- `split_by(s, sep)` splits on `sep`. Empty inner fields are kept. A single
  trailing separator does not add an empty field.
- `join(sep, items)` joins the string forms of the items. It raises
  `ValueError` when there are no items.
- `head(items, top)` returns the first `top` items. A negative `top` gives
  nothing.

### `docsearch.profile`

- `LogDuration(message)` is a context manager. When the block ends, it writes
  the elapsed time to standard error, broken into seconds, milliseconds,
  microseconds and nanoseconds.
- `TotalDuration(message)` adds up durations. `report()` writes the total in
  milliseconds to standard error, and leaving its `with` block calls `report()`.
- `AddDuration(total)` is a context manager that adds the time spent in its
  block to a `TotalDuration`.
- `format_duration(nanoseconds)` formats a duration the way `LogDuration` does.

## What it does not do

There is no command-line program. Documents and queries are read from streams
that the caller supplies. The index is held only in memory and is never saved.

## Tests

```
pip install .[test]
pytest
```