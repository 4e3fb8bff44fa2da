"""
Wanderlust Backend: Request ID Tests
======================================

What:  RequestIDLogFilter stamps records with the current request ID.
"""

import logging

from wanderlust.middleware.request_id import RequestIDLogFilter, request_id_var


def make_record():
    return logging.LogRecord("wanderlust.test", logging.INFO, __file__, 1, "hello", None, None)


class TestRequestIDLogFilter:
    def test_record_outside_a_request_gets_placeholder(self):
        record = make_record()
        assert RequestIDLogFilter().filter(record) is True
        assert record.request_id == "-"

    def test_record_inside_a_request_gets_its_id(self):
        token = request_id_var.set("abc12345")
        try:
            record = make_record()
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)

        assert record.request_id == "abc12345"

    def test_format_includes_request_id(self):
        token = request_id_var.set("trace-7")
        try:
            record = make_record()
            RequestIDLogFilter().filter(record)
        finally:
            request_id_var.reset(token)

        formatter = logging.Formatter("%(name)s [%(request_id)s]: %(message)s")
        assert formatter.format(record) == "wanderlust.test [trace-7]: hello"
