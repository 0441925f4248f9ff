import json
import unittest

import pydantic

from commit_ngrams import events
from commit_ngrams.data import Author, Commit, OtherEvent, PushEvent, PushPayload


def push_line(commits) -> str:
    return json.dumps({"type": "PushEvent", "payload": {"commits": commits}})


class DecodeEventTest(unittest.TestCase):
    def test_push_event(self):
        line = push_line(
            [
                {
                    "sha": "abc",
                    "message": "Fix bug",
                    "author": {"name": "ann", "email": "ann@example.com"},
                }
            ]
        )
        self.assertEqual(
            PushEvent(
                PushPayload(
                    commits=[Commit(message="Fix bug", author=Author(name="ann"))]
                )
            ),
            events.decode_event(line),
        )

    def test_push_event_without_commits_in_list(self):
        event = events.decode_event(push_line([]))
        self.assertEqual(PushEvent(PushPayload(commits=[])), event)

    def test_other_event_ignores_shape(self):
        self.assertEqual(
            OtherEvent("WatchEvent"), events.decode_event('{"type":"WatchEvent"}')
        )
        self.assertEqual(
            OtherEvent("IssuesEvent"),
            events.decode_event('{"type": "IssuesEvent", "payload": 42}'),
        )

    def test_invalid_json(self):
        with self.assertRaises(events.MalformedEventError) as ctx:
            events.decode_event('{"type": "PushEvent"', line_number=7)
        self.assertEqual(7, ctx.exception.line_number)
        self.assertIn("line 7", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, json.JSONDecodeError)

    def test_not_an_object(self):
        with self.assertRaises(events.MalformedEventError):
            events.decode_event('["PushEvent"]')

    def test_missing_type(self):
        with self.assertRaises(events.MalformedEventError):
            events.decode_event('{"payload": {"commits": []}}')

        with self.assertRaises(events.MalformedEventError):
            events.decode_event('{"type": 1}')

    def test_push_event_missing_commits(self):
        with self.assertRaises(events.MalformedEventError) as ctx:
            events.decode_event('{"type": "PushEvent", "payload": {}}')
        self.assertIsInstance(ctx.exception.__cause__, pydantic.ValidationError)
        self.assertIn("payload.commits", str(ctx.exception))

    def test_push_event_missing_payload(self):
        with self.assertRaises(events.MalformedEventError):
            events.decode_event('{"type": "PushEvent"}')

    def test_push_event_missing_author_name(self):
        with self.assertRaises(events.MalformedEventError):
            events.decode_event(push_line([{"message": "x", "author": {}}]))

    def test_push_event_mistyped_message(self):
        with self.assertRaises(events.MalformedEventError):
            events.decode_event(push_line([{"message": 1, "author": {"name": "a"}}]))

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            events.decode_event("not json")


if __name__ == "__main__":
    unittest.main()
