"""
ログサニタイザーのテスト
"""
import pytest

from translate_http.utils.log_sanitizer import (
    MASK,
    mask_canonical_request,
    mask_headers,
    mask_signature_header,
    mask_url,
)


@pytest.mark.unit
def test_mask_headers():
    headers = {
        "X-Amz-Date": "20240115T093000Z",
        "x-amz-content-sha256": "abc123",
        "x-amz-security-token": "token",
        "Authorization": "AWS4-HMAC-SHA256 Credential=...",
        "X-Amz-Target": "AWSShineFrontendService_20170701.TranslateText",
    }

    masked = mask_headers(headers)

    assert masked["x-amz-security-token"] == MASK
    assert masked["Authorization"] == MASK
    assert masked["X-Amz-Date"] == "20240115T093000Z"
    assert masked["x-amz-content-sha256"] == "abc123"
    assert masked["X-Amz-Target"] == headers["X-Amz-Target"]


@pytest.mark.unit
def test_mask_url():
    url = "https://translate.us-east-1.amazonaws.com/?X-Amz-Signature=deadbeef&Action=List"

    masked = mask_url(url)

    assert "deadbeef" not in masked
    assert "Action=List" in masked


@pytest.mark.unit
def test_mask_url_without_query():
    url = "https://translate.us-east-1.amazonaws.com/"
    assert mask_url(url) == url


@pytest.mark.unit
def test_mask_signature_header():
    value = (
        "AWS4-HMAC-SHA256 Credential=AKID/20240115/us-east-1/translate/aws4_request, "
        "SignedHeaders=host;x-amz-date, Signature=0123abcd"
    )

    masked = mask_signature_header(value)

    assert masked.endswith(f"Signature={MASK}")
    assert "Credential=AKID/20240115" in masked
    assert mask_signature_header(None) is None


@pytest.mark.unit
def test_mask_canonical_request():
    canonical = (
        "POST\n/\n\n"
        "host:translate.us-east-1.amazonaws.com\n"
        "x-amz-date:20240115T093000Z\n"
        "x-amz-security-token:session-token-example\n\n"
        "host;x-amz-date;x-amz-security-token\n"
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )

    masked = mask_canonical_request(canonical)

    assert "session-token-example" not in masked
    assert f"x-amz-security-token:{MASK}\n" in masked
    assert "host;x-amz-date;x-amz-security-token" in masked
    assert mask_canonical_request(None) is None
