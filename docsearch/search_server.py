"""An inverted index over text documents and a server answering word queries."""

from __future__ import annotations

import heapq
import threading
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TextIO

from docsearch.parse import head
from docsearch.profile import LogDuration

ANSWERS_COUNT = 5


def split_into_words(line: str) -> list[str]:
    """Split a line into words separated by runs of spaces."""
    return [word for word in line.split(" ") if word]


def _lines(stream: Iterable[str]) -> Iterable[str]:
    """Yield lines of ``stream`` without their terminating newline."""
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


class InvertedIndex:
    """Maps each word to the documents that hold it and how often."""

    def __init__(self) -> None:
        self._index: dict[str, list[list[int]]] = {}
        self._docs: list[str] = []

    def add(self, document: str) -> None:
        """Add a document; it receives the next document id."""
        self._docs.append(document)
        doc_id = len(self._docs) - 1
        for word in split_into_words(document):
            postings = self._index.setdefault(word, [])
            if postings and postings[-1][0] == doc_id:
                postings[-1][1] += 1
            else:
                postings.append([doc_id, 1])

    def lookup(self, word: str) -> list[tuple[int, int]]:
        """Return ``(doc_id, count)`` pairs for ``word`` in document order."""
        return [(doc_id, count) for doc_id, count in self._index.get(word, ())]

    def get_document(self, doc_id: int) -> str:
        """Return the text of the document with the given id."""
        if doc_id < 0:
            raise IndexError(f"no document with id {doc_id}")
        return self._docs[doc_id]


class SearchServer:
    """Answers queries against a document base, processing query streams in the background."""

    def __init__(self, document_input: Iterable[str] | None = None) -> None:
        self._index = InvertedIndex()
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor()
        self._futures: list[Future[None]] = []
        if document_input is not None:
            self.update_document_base(document_input)

    def update_document_base(self, document_input: Iterable[str]) -> None:
        """Replace the document base with one document per input line."""
        with LogDuration("UpdateDocumentBase"):
            new_index = InvertedIndex()
            for document in _lines(document_input):
                new_index.add(document)
            with self._lock:
                self._index = new_index

    def search(self, query: str) -> list[tuple[int, int]]:
        """Return up to five ``(doc_id, hitcount)`` pairs, best matches first.

        Documents are ranked by hit count, highest first, and by document
        id, lowest first, among equal counts.
        """
        hits: dict[int, int] = {}
        for word in split_into_words(query):
            with self._lock:
                postings = self._index.lookup(word)
            for doc_id, count in postings:
                hits[doc_id] = hits.get(doc_id, 0) + count
        ranked = heapq.nsmallest(
            ANSWERS_COUNT, hits.items(), key=lambda pair: (-pair[1], pair[0])
        )
        return list(head(ranked, ANSWERS_COUNT))

    def _process_queries(self, query_input: Iterable[str], output: TextIO) -> None:
        with LogDuration("AddQueriesStream"):
            for query in _lines(query_input):
                answers = "".join(
                    f" {{docid: {doc_id}, hitcount: {hitcount}}}"
                    for doc_id, hitcount in self.search(query)
                )
                output.write(f"{query}:{answers}\n")

    def add_queries_stream(
        self, query_input: Iterable[str], search_results_output: TextIO
    ) -> Future[None]:
        """Answer every query line in the background, writing one result line each."""
        future = self._executor.submit(
            self._process_queries, query_input, search_results_output
        )
        self._futures.append(future)
        return future

    def wait(self) -> None:
        """Block until every pending query stream is done, re-raising its errors."""
        futures, self._futures = self._futures, []
        errors = []
        for future in futures:
            try:
                future.result()
            except Exception as exc:  # collect so every stream finishes first
                errors.append(exc)
        if errors:
            raise errors[0]

    def __enter__(self) -> SearchServer:
        return self

    def __exit__(self, *args: Any) -> None:
        try:
            self.wait()
        finally:
            self._executor.shutdown(wait=True)