"""Tests for project generation and POM property extraction."""

from unittest.mock import Mock, patch

import pytest

from cli_config import RunConfig
from errors import ParseError
from registry.pom import generate_properties, parse_properties, project_url

POM = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 https://maven.apache.org/xsd/maven-4.0.0.xsd">
    <modelVersion>4.0.0</modelVersion>
    <parent>
        <groupId>org.springframework.boot</groupId>
        <artifactId>spring-boot-starter-parent</artifactId>
        <version>3.1.5</version>
    </parent>
    <properties>
        <java.version>17</java.version>
        <!-- managed BOMs -->
        <spring-cloud-gcp.version>4.8.0</spring-cloud-gcp.version>
        <spring-cloud.version>
            2022.0.4
        </spring-cloud.version>
        <empty.version/>
    </properties>
</project>
"""


class TestParseProperties:
    """POM <properties> extraction."""

    def test_document_order_and_namespace_stripped(self):
        props = parse_properties(POM)
        assert list(props) == ["java.version", "spring-cloud-gcp.version", "spring-cloud.version", "empty.version"]

    def test_values_are_trimmed(self):
        props = parse_properties(POM)
        assert props["spring-cloud.version"] == "2022.0.4"
        assert props["empty.version"] == ""

    def test_without_namespace(self):
        props = parse_properties("<project><properties><a>1</a></properties></project>")
        assert props == {"a": "1"}

    def test_without_properties(self):
        assert parse_properties("<project><modelVersion>4.0.0</modelVersion></project>") == {}

    def test_bytes_input(self):
        assert parse_properties(POM.encode("utf-8"))["java.version"] == "17"

    def test_malformed_xml(self):
        with pytest.raises(ParseError):
            parse_properties("<html><body>Whitelabel Error Page")


class TestGenerateProperties:
    """Project generation request."""

    def test_project_url(self):
        assert project_url("https://start.spring.io", "/pom.xml") == "https://start.spring.io/pom.xml"

    @patch("common.http_client.safe_get")
    def test_request_parameters(self, mock_get):
        mock_get.return_value = Mock(content=POM.encode("utf-8"))
        config = RunConfig(starter_url="https://starter.example", insecure=True, timeout=12)

        props = generate_properties(config, "/pom.xml", "3.1.5", ["cloud-starter", "native"])

        assert props["spring-cloud-gcp.version"] == "4.8.0"
        mock_get.assert_called_once_with(
            "https://starter.example/pom.xml",
            context="starter",
            insecure=True,
            timeout=12,
            params={"BootVersion": "3.1.5", "dependencies": ["cloud-starter", "native"]},
        )

    @patch("common.http_client.safe_get")
    def test_declared_encoding_is_honoured(self, mock_get):
        latin1_pom = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            "<project><properties><vendor.name>Müller</vendor.name></properties></project>"
        )
        # requests would guess a different charset for .text; the raw bytes carry the declaration
        mock_get.return_value = Mock(content=latin1_pom.encode("iso-8859-1"), text="garbled")
        config = RunConfig()

        props = generate_properties(config, "/pom.xml", "3.1.5", [])

        assert props == {"vendor.name": "Müller"}
