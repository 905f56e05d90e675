"""Test commitdef."""

import unittest

from .context import commitstyle  # noqa: F401

from commitstyle import commitdef  # noqa: I100


class TestSplitMessage(unittest.TestCase):
    """Test commitdef.split_message."""

    def test_split_message(self):
        for message, subject, body in [
                ('Fix bug\n\nDetails here\nmore details', 'Fix bug', 'Details here\nmore details'),
                ('Fix bug', 'Fix bug', ''),
                ('Fix bug\n', 'Fix bug\n', ''),
                ('Fix bug\n\n', 'Fix bug', ''),
                ('Two line\nsubject\n\nBody', 'Two line\nsubject', 'Body'),
                ('Subject\n\nPara 1\n\nPara 2', 'Subject', 'Para 1\n\nPara 2'),
                ('', '', ''),
        ]:
            with self.subTest(message=message):
                self.assertEqual((subject, body), commitdef.split_message(message))

    def test_inverse(self):
        subject = 'Add a feature'
        body = 'It does things.\n\nMany things.'
        self.assertEqual((subject, body), commitdef.split_message(subject + '\n\n' + body))


class TestCommitRecord(unittest.TestCase):
    """Test commitdef.CommitRecord."""

    def test_marks(self):
        commit = commitdef.CommitRecord('Subject', 'Body', 'A <a@example.com>',
                                        '0123456789abcdef0123456789abcdef01234567')
        self.assertFalse(commit.subject_flagged)
        self.assertEqual(commit.body_flagged_lines, [])
        commit.mark_subject()
        commit.mark_body(3)
        commit.mark_body(5)
        self.assertTrue(commit.subject_flagged)
        self.assertEqual(commit.body_flagged_lines, [3, 5])
        self.assertEqual(commit.short_hash, '01234567')

    def test_separate_flag_lists(self):
        first = commitdef.CommitRecord()
        second = commitdef.CommitRecord()
        first.mark_body(1)
        self.assertEqual(second.body_flagged_lines, [])
