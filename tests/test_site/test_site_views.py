"""Tests for the site views and URL routing.

Covers the fixed top-level files, section pages, AMP popups and the 404
fallback with full template rendering of the bundled site content via the
Django test client.
"""

import json

import pytest
from django.test import Client, override_settings

from django_devsummit.settings import DevSummitConfig, get_config
from django_devsummit.site.dispatcher import get_dispatcher
from django_devsummit.site.policy import feature_policy
from django_devsummit.site.urls import asset_patterns


@pytest.fixture
def client() -> Client:
    return Client()


def _body(response) -> str:
    if response.streaming:
        return b"".join(response.streaming_content).decode()
    return response.content.decode()


class TestTopLevelFiles:
    def test_service_worker(self, client: Client) -> None:
        response = client.get("/sw.js")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/javascript"
        assert "addEventListener" in _body(response)

    def test_service_worker_missing_in_production_build(self, client: Client) -> None:
        with override_settings(DJANGO_DEVSUMMIT={"production": True}):
            response = client.get("/sw.js")

        assert response.status_code == 404

    def test_schedule_json(self, client: Client) -> None:
        response = client.get("/schedule.json")

        assert response.status_code == 200
        assert response["Content-Type"] == "application/json"
        data = json.loads(_body(response))
        assert data == json.loads(get_config().schedule_path.read_text())

    def test_site_verification_file(self, client: Client) -> None:
        response = client.get("/googlec6dfdf23945d0d0c.html")

        assert response.status_code == 200
        assert "google-site-verification" in _body(response)

    def test_sitemap(self, client: Client) -> None:
        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/xml")
        body = _body(response)
        assert body.startswith("<?xml")
        assert "<loc>http://testserver/schedule</loc>" in body
        assert "<loc>http://testserver/schedule/keynote</loc>" in body
        assert "<loc>http://testserver/speakers/dion</loc>" in body
        assert "_draft" not in body

    def test_sitemap_uses_mount_prefix(self, client: Client) -> None:
        response = client.get("/sitemap.xml", SCRIPT_NAME="/cds")

        assert "<loc>http://testserver/cds/schedule/keynote</loc>" in _body(response)


class TestSectionPages:
    def test_index(self, client: Client) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response["Feature-Policy"] == feature_policy(False)
        assert response.context["path"] == ""
        assert response.context["layout"] == "devsummit"
        assert response.context["canonicalUrl"] == "http://testserver/"
        assert "Chrome Dev Summit 2019" in response.content.decode()

    def test_schedule_lists_days(self, client: Client) -> None:
        response = client.get("/schedule")

        assert response.status_code == 200
        content = response.content.decode()
        assert "Monday 11 November" in content
        assert "Tuesday 12 November" in content
        assert "Keynote" in content
        assert "Unannounced session" not in content

    def test_trailing_slash(self, client: Client) -> None:
        response = client.get("/faq/")

        assert response.status_code == 200
        assert response.context["path"] == "faq"

    @pytest.mark.parametrize("url", ["/nope", "/index", "/_amp-session", "/_sitemap", "/keynote"])
    def test_unknown_sections_are_404(self, client: Client, url: str) -> None:
        response = client.get(url)

        assert response.status_code == 404
        assert "Page not found" in response.content.decode()
        assert "Feature-Policy" not in response

    def test_mount_prefix(self, client: Client) -> None:
        response = client.get("/schedule", SCRIPT_NAME="/cds")

        assert response.status_code == 200
        assert response.context["base"] == "/cds"
        assert response.context["canonicalUrl"] == "http://testserver/cds/schedule"
        assert 'href="/cds/schedule"' in response.content.decode()

    def test_production_scope(self, client: Client) -> None:
        with override_settings(DJANGO_DEVSUMMIT={"production": True}):
            response = client.get("/faq")

        assert response.status_code == 200
        assert response["Feature-Policy"] == feature_policy(True)
        assert response.context["prod"] is True
        assert response.context["sourcePrefix"] == "res"
        assert response.context["canonicalUrl"] == "https://testserver/faq"
        assert 'rel="manifest" href="/res/manifest.json"' in response.content.decode()

    def test_development_manifest_link(self, client: Client) -> None:
        response = client.get("/faq")

        assert 'rel="manifest" href="/static/manifest.json"' in response.content.decode()
        assert client.get("/static/manifest.json").status_code == 200


class TestPopups:
    def test_session_popup(self, client: Client) -> None:
        response = client.get("/schedule/keynote")

        assert response.status_code == 200
        assert response["Feature-Policy"] == feature_policy(False)
        assert response.context["layout"] == "amp"
        assert response.context["bodyClass"] == "schedule-popup"
        assert response.context["id"] == "keynote"
        assert response.context["payload"]["name"] == "Keynote"
        assert response.context["canonicalUrl"] == "http://testserver/schedule/keynote"
        content = response.content.decode()
        assert '<body class="schedule-popup">' in content
        assert "<style amp-custom>" in content
        assert ".popup-header" in content
        assert 'data-videoid="F1UP7wRCPH8"' in content
        assert 'id="popup-payload"' in content

    def test_speaker_popup(self, client: Client) -> None:
        response = client.get("/speakers/dion/")

        assert response.status_code == 200
        assert response.context["bodyClass"] == "speaker-popup"
        assert response.context["title"] == "Dion Almaer"
        assert response.context["youtube_id"] is False

    def test_popup_under_any_section(self, client: Client) -> None:
        response = client.get("/faq/web-vitals")

        assert response.status_code == 200
        assert response.context["path"] == "faq"
        assert response.context["title"] == "Speed at Scale"

    @pytest.mark.parametrize("url", ["/schedule/missing", "/schedule/_draft", "/nope/keynote", "/schedule/a/b"])
    def test_unresolvable_popups_are_404(self, client: Client, url: str) -> None:
        assert client.get(url).status_code == 404

    def test_development_recompiles_amp_css(self, client: Client) -> None:
        client.get("/schedule/keynote")

        assert get_dispatcher().amp_css.cached is None

    def test_production_keeps_compiled_amp_css(self, client: Client) -> None:
        with override_settings(DJANGO_DEVSUMMIT={"production": True}):
            first = client.get("/schedule/keynote")
            cached = get_dispatcher().amp_css.cached
            second = client.get("/speakers/ben")

            assert cached is not None
            assert first.context["styles"] is cached
            assert second.context["styles"] is cached


@pytest.mark.urls("tests.mounted_urls")
class TestIncludeMount:
    def test_section_page(self, client: Client) -> None:
        response = client.get("/devsummit/schedule/")

        assert response.status_code == 200
        assert response.context["base"] == "/devsummit"
        assert response.context["canonicalUrl"] == "http://testserver/devsummit/schedule"
        assert 'href="/devsummit/schedule"' in response.content.decode()

    def test_index(self, client: Client) -> None:
        response = client.get("/devsummit/")

        assert response.status_code == 200
        assert response.context["base"] == "/devsummit"
        assert response.context["canonicalUrl"] == "http://testserver/devsummit/"

    def test_popup(self, client: Client) -> None:
        response = client.get("/devsummit/schedule/keynote")

        assert response.status_code == 200
        assert response.context["sitePrefix"] == "http://testserver/devsummit"
        assert response.context["canonicalUrl"] == "http://testserver/devsummit/schedule/keynote"

    def test_query_string_is_ignored(self, client: Client) -> None:
        response = client.get("/devsummit/faq?utm=faq")

        assert response.status_code == 200
        assert response.context["base"] == "/devsummit"

    def test_sitemap(self, client: Client) -> None:
        response = client.get("/devsummit/sitemap.xml")

        assert response.status_code == 200
        body = _body(response)
        assert "<loc>http://testserver/devsummit/schedule</loc>" in body
        assert "<loc>http://testserver/devsummit/schedule/keynote</loc>" in body

    def test_script_name_and_include(self, client: Client) -> None:
        response = client.get("/devsummit/schedule", SCRIPT_NAME="/cds")

        assert response.status_code == 200
        assert response.context["base"] == "/cds/devsummit"
        assert response.context["canonicalUrl"] == "http://testserver/cds/devsummit/schedule"

    def test_unmounted_paths_are_404(self, client: Client) -> None:
        assert client.get("/schedule").status_code == 404


class TestAssets:
    def test_development_static_mount(self, client: Client) -> None:
        response = client.get("/static/styles/amp.less")

        assert response.status_code == 200
        assert "@gutter" in _body(response)

    def test_development_source_mount(self, client: Client) -> None:
        assert client.get("/src/sw.js").status_code == 200

    def test_asset_patterns_per_environment(self) -> None:
        prod = [pattern.name for pattern in asset_patterns(DevSummitConfig(production=True))]
        dev = [pattern.name for pattern in asset_patterns(DevSummitConfig(production=False))]

        assert prod == ["assets-res"]
        assert dev == ["assets-static", "assets-src", "assets-node-modules"]
