import dataclasses
import unittest

from conventional_commits.model.commit import Commit
from conventional_commits.model.footer import Footer
from conventional_commits.model.footer_separator import FooterSeparator


REVIEWED = Footer("Reviewed-by", FooterSeparator.COLON_SPACE, "alice")
FIXES = Footer("Fixes", FooterSeparator.SPACE_HASHTAG, "123")


def make_commit(**overrides) -> Commit:
    values = dict(
        type="feat",
        scope="parser",
        description="add support",
        body=None,
        is_breaking_change=False,
        footers=[REVIEWED],
    )
    values.update(overrides)
    return Commit(**values)


class TestCommit(unittest.TestCase):
    def test_default_commit(self) -> None:
        commit = Commit()
        self.assertEqual(commit.type, "")
        self.assertEqual(commit.description, "")
        self.assertIsNone(commit.scope)
        self.assertIsNone(commit.body)
        self.assertFalse(commit.is_breaking_change)
        self.assertEqual(commit.footers, ())

    def test_positional_construction(self) -> None:
        commit = Commit("fix", None, "handle empty input", "Longer text.", True, [FIXES])
        self.assertEqual(commit.type, "fix")
        self.assertIsNone(commit.scope)
        self.assertEqual(commit.description, "handle empty input")
        self.assertEqual(commit.body, "Longer text.")
        self.assertTrue(commit.is_breaking_change)
        self.assertEqual(commit.footers, (FIXES,))

    def test_empty_scope_differs_from_no_scope(self) -> None:
        self.assertNotEqual(make_commit(scope=""), make_commit(scope=None))

    def test_identical_arguments_are_equal(self) -> None:
        a = make_commit()
        b = make_commit()
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_breaking_change_flag_affects_equality(self) -> None:
        self.assertNotEqual(make_commit(), make_commit(is_breaking_change=True))

    def test_changing_any_field_breaks_equality(self) -> None:
        base = make_commit()
        for field_name, value in (
            ("type", "fix"),
            ("scope", "lexer"),
            ("description", "add more support"),
            ("body", "details"),
            ("footers", []),
        ):
            with self.subTest(field=field_name):
                self.assertNotEqual(base, make_commit(**{field_name: value}))

    def test_footer_order_matters(self) -> None:
        self.assertNotEqual(make_commit(footers=[REVIEWED, FIXES]), make_commit(footers=[FIXES, REVIEWED]))

    def test_footers_are_copied_on_construction(self) -> None:
        footers = [REVIEWED]
        commit = make_commit(footers=footers)
        footers.append(FIXES)
        footers[0] = Footer()
        self.assertEqual(commit.footers, (REVIEWED,))

    def test_footers_accept_any_iterable(self) -> None:
        commit = make_commit(footers=(f for f in [REVIEWED, FIXES]))
        self.assertEqual(commit.footers, (REVIEWED, FIXES))

    def test_commit_is_hashable_with_footers(self) -> None:
        self.assertEqual(len({make_commit(), make_commit(), make_commit(footers=[FIXES])}), 2)

    def test_commit_is_immutable(self) -> None:
        commit = make_commit()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            commit.type = "fix"  # type: ignore[misc]
        edited = dataclasses.replace(commit, footers=[REVIEWED, FIXES])
        self.assertEqual(edited.footers, (REVIEWED, FIXES))
        self.assertEqual(commit.footers, (REVIEWED,))

    def test_separator_of_footer_renders(self) -> None:
        commit = make_commit(footers=[FIXES])
        self.assertEqual(commit.footers[0].separator.to_text(), " #")


if __name__ == "__main__":
    unittest.main()
