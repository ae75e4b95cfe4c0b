"""Tests for typeahead endpoint resolution."""

from __future__ import annotations

import sys
import unittest
from dataclasses import replace
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SuggestShaper.core.errors import MissingEndpointError
from SuggestShaper.core.models import EndpointConfig, EndpointMode, SelectionAction
from SuggestShaper.endpoint.resolve import resolve, try_resolve


class TestResolveManaged(unittest.TestCase):
    def test_managed_url_composition(self) -> None:
        cfg = EndpointConfig(
            mode=EndpointMode.MANAGED,
            managed_host_base_url="https://x.elasticpress.io",
            index_name="idx1",
        )
        resolved = resolve(cfg)
        self.assertEqual(resolved.url, "https://x.elasticpress.io/idx1/post/_search")
        self.assertFalse(resolved.requires_operator_acknowledgement)

    def test_managed_trailing_slashes_normalized(self) -> None:
        cfg = EndpointConfig(
            mode=EndpointMode.MANAGED,
            managed_host_base_url="https://x.elasticpress.io//",
            index_name="/idx1/",
        )
        self.assertEqual(resolve(cfg).url, "https://x.elasticpress.io/idx1/post/_search")

    def test_managed_without_host_or_index_fails(self) -> None:
        with self.assertRaises(MissingEndpointError):
            resolve(EndpointConfig(mode=EndpointMode.MANAGED, index_name="idx1"))
        with self.assertRaisesRegex(MissingEndpointError, "index name"):
            resolve(EndpointConfig(mode=EndpointMode.MANAGED, managed_host_base_url="https://x.elasticpress.io"))


class TestResolveSelfHosted(unittest.TestCase):
    def test_empty_url_fails(self) -> None:
        with self.assertRaises(MissingEndpointError) as ctx:
            resolve(EndpointConfig(mode=EndpointMode.SELF_HOSTED, self_hosted_endpoint_url=""))
        self.assertIs(ctx.exception.mode, EndpointMode.SELF_HOSTED)

    def test_blank_url_fails(self) -> None:
        with self.assertRaises(MissingEndpointError):
            resolve(EndpointConfig(mode=EndpointMode.SELF_HOSTED, self_hosted_endpoint_url="   "))

    def test_trailing_slash_stripped_and_ack_required(self) -> None:
        resolved = resolve(
            EndpointConfig(mode=EndpointMode.SELF_HOSTED, self_hosted_endpoint_url="http://my.host/search/")
        )
        self.assertEqual(resolved.url, "http://my.host/search")
        self.assertTrue(resolved.requires_operator_acknowledgement)

    def test_mode_accepts_raw_value(self) -> None:
        resolved = resolve(EndpointConfig(mode="self_hosted", self_hosted_endpoint_url="http://my.host"))
        self.assertTrue(resolved.requires_operator_acknowledgement)


class TestResolveDefaults(unittest.TestCase):
    _cfg = EndpointConfig(mode=EndpointMode.SELF_HOSTED, self_hosted_endpoint_url="http://my.host/search")

    def test_defaults(self) -> None:
        resolved = resolve(self._cfg)
        self.assertEqual(resolved.search_fields, ("title.suggest", "term_suggest"))
        self.assertEqual(resolved.post_types, ("post", "page"))
        self.assertEqual(resolved.post_status, "published")
        self.assertIs(resolved.selection_action, SelectionAction.NAVIGATE)

    def test_pass_through_with_ordered_dedup(self) -> None:
        cfg = replace(
            self._cfg,
            search_fields=["term_suggest", "title.suggest", "term_suggest"],
            post_types=["product"],
            post_status="private",
            selection_action=SelectionAction.SEARCH,
        )
        resolved = resolve(cfg)
        self.assertEqual(resolved.search_fields, ("term_suggest", "title.suggest"))
        self.assertEqual(resolved.post_types, ("product",))
        self.assertEqual(resolved.post_status, "private")
        self.assertIs(resolved.selection_action, SelectionAction.SEARCH)

    def test_empty_list_is_kept_not_defaulted(self) -> None:
        resolved = resolve(replace(self._cfg, post_types=[]))
        self.assertEqual(resolved.post_types, ())

    def test_post_process_applied_last(self) -> None:
        seen = []

        def add_product(resolved):
            seen.append(resolved.post_types)
            return replace(resolved, post_types=resolved.post_types + ("product",))

        resolved = resolve(self._cfg, post_process=add_product)
        self.assertEqual(seen, [("post", "page")])
        self.assertEqual(resolved.post_types, ("post", "page", "product"))


class TestTryResolve(unittest.TestCase):
    def test_failure_is_returned_not_raised(self) -> None:
        outcome = try_resolve(EndpointConfig(mode=EndpointMode.SELF_HOSTED))
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.value)
        self.assertIsInstance(outcome.error, MissingEndpointError)

    def test_success(self) -> None:
        outcome = try_resolve(EndpointConfig(mode=EndpointMode.SELF_HOSTED, self_hosted_endpoint_url="http://h/"))
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.value.url, "http://h")


if __name__ == "__main__":
    unittest.main()
