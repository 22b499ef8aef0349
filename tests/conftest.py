import pytest

from coins_collector import config as config_module

JOURNAL_CO = (
    "ctx_ver=Z39.88-2004"
    "&rft_val_fmt=info%3Aofi%2Ffmt%3Akev%3Amtx%3Ajournal"
    "&rft_id=info%3Adoi%2F10.1000%2Fxyz123"
    "&rft.atitle=Hello+World"
    "&rft.au=Smith%2C+J."
    "&rft.au=Jones%2C+K."
)
BOOK_CO = "rft_val_fmt=info%3Aofi%2Ffmt%3Akev%3Amtx%3Abook&rft.btitle=A+Book"


def coins_span(ctx: str, cls: str = "Z3988") -> str:
    return f'<span class="{cls}" title="{ctx.replace("&", "&amp;")}"></span>'


def html_page(*spans: str) -> str:
    body = "\n".join(f"<p>{span}</p>" for span in spans)
    return f"<html><head><title>Test</title></head><body>{body}</body></html>"


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    base = tmp_path / "config-home"
    monkeypatch.setattr(config_module, "DEFAULT_BASE_DIR", base)
    return base
