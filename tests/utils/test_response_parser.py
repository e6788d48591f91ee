"""
レスポンスパーサーのテスト
"""
import pytest

from translate_http.utils.response_parser import (
    ResponseParseError,
    extract_error_message,
    extract_error_type,
    parse_json,
    parse_xml,
)


class TestParse:
    """JSON / XML パースのテスト"""

    @pytest.mark.unit
    def test_parse_json(self):
        assert parse_json('{"TranslatedText":"hola"}') == {"TranslatedText": "hola"}

    @pytest.mark.unit
    def test_parse_json_invalid(self):
        with pytest.raises(ResponseParseError):
            parse_json("OK")

    @pytest.mark.unit
    def test_parse_xml_nested(self):
        text = "<Error><Code>AccessDenied</Code><Message>denied</Message></Error>"
        assert parse_xml(text) == {"Error": {"Code": "AccessDenied", "Message": "denied"}}

    @pytest.mark.unit
    def test_parse_xml_repeated_elements(self):
        """同名要素はリストにまとめる"""
        text = "<Errors><Error>a</Error><Error>b</Error></Errors>"
        assert parse_xml(text) == {"Errors": {"Error": ["a", "b"]}}

    @pytest.mark.unit
    def test_parse_xml_namespace_stripped(self):
        text = '<ErrorResponse xmlns="https://iam.amazonaws.com/doc/2010-05-08/"><Error><Code>X</Code></Error></ErrorResponse>'
        assert parse_xml(text) == {"ErrorResponse": {"Error": {"Code": "X"}}}

    @pytest.mark.unit
    def test_parse_xml_invalid(self):
        with pytest.raises(ResponseParseError):
            parse_xml("Bad Gateway")


class TestExtractErrorType:
    """エラー種別抽出のテスト"""

    @pytest.mark.unit
    def test_json_type(self):
        assert extract_error_type({"__type": "TooManyRequestsException"}, "json") == "TooManyRequestsException"

    @pytest.mark.unit
    def test_json_type_with_namespace(self):
        data = {"__type": "com.amazonaws.translate.v20170701#TextSizeLimitExceededException"}
        assert extract_error_type(data, "json") == "TextSizeLimitExceededException"

    @pytest.mark.unit
    def test_json_without_type(self):
        assert extract_error_type({"message": "x"}, "json") == "UnknownError"

    @pytest.mark.unit
    def test_xml_code(self):
        data = {"ErrorResponse": {"Error": {"Code": "SignatureDoesNotMatch"}}}
        assert extract_error_type(data, "xml") == "SignatureDoesNotMatch"

    @pytest.mark.unit
    def test_xml_root_tag(self):
        assert extract_error_type({"AccessDeniedException": {"Message": "no"}}, "xml") == "AccessDeniedException"

    @pytest.mark.unit
    def test_unparsed(self):
        assert extract_error_type("Bad Gateway", None) == "UnknownError"

    @pytest.mark.unit
    def test_extract_message(self):
        assert extract_error_message({"message": "lowercase"}) == "lowercase"
        assert extract_error_message("raw") is None
