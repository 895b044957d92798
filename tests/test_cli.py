"""Tests for the command-line interface."""

import json

import pytest
import yaml

from ycard.cli.main import main

ORG_YAML = """\
people:
  - uid: jordan
    name: Jordan
    surname: Lee
    title: CTO
    org: Acme
    jobs:
      - role: Advisor
      - role: Mentor
  - uid: ann
    nombre: Ann
    puesto: Director
    i18n:
      puesto: {es: Directora}
"""


@pytest.fixture
def org_file(tmp_path):
    path = tmp_path / "org.yaml"
    path.write_text(ORG_YAML, encoding="utf-8")
    return path


class TestExport:
    """The export command."""

    def test_vcard_to_stdout(self, org_file, capsys):
        """Test exporting vCard to standard output."""
        main(["export", str(org_file)])
        out = capsys.readouterr().out

        assert out.count("BEGIN:VCARD") == 4
        assert "UID:jordan-job-1" in out

    def test_csv_to_file(self, org_file, tmp_path):
        """Test exporting CSV to a file."""
        output = tmp_path / "out" / "org.csv"
        main(["export", str(org_file), "--format", "csv", "--output", str(output)])

        assert output.read_text(encoding="utf-8").startswith('"UID","Name"')

    def test_ldif_base_dn(self, org_file, capsys):
        """Test the base DN option."""
        main(["export", str(org_file), "--format", "ldif", "--base-dn", "dc=acme,dc=com"])

        assert "dn: uid=ann,dc=acme,dc=com" in capsys.readouterr().out

    def test_localized_export(self, org_file, capsys):
        """Test exporting with translations applied."""
        main(["export", str(org_file), "--lang", "es"])

        assert "TITLE:Directora" in capsys.readouterr().out

    def test_invalid_document_exits(self, tmp_path, capsys):
        """Test that validation problems are printed and exit with status 1."""
        path = tmp_path / "bad.yaml"
        path.write_text("people:\n  - name: x\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["export", str(path)])

        assert exc_info.value.code == 1
        assert "MissingRequiredField" in capsys.readouterr().err

    def test_missing_file_exits(self, tmp_path):
        """Test a missing input file."""
        with pytest.raises(SystemExit) as exc_info:
            main(["export", str(tmp_path / "nope.yaml")])

        assert exc_info.value.code == 1


class TestImport:
    """The import command."""

    def test_import_round_trip(self, org_file, tmp_path, capsys):
        """Test importing an exported file."""
        vcf = tmp_path / "org.vcf"
        main(["export", str(org_file), "--output", str(vcf)])
        capsys.readouterr()

        main(["import", str(vcf)])
        data = yaml.safe_load(capsys.readouterr().out)

        assert [person["uid"] for person in data["people"]] == [
            "jordan",
            "jordan-job-0",
            "jordan-job-1",
            "ann",
        ]

    def test_strict_import_fails_on_malformed_record(self, tmp_path):
        """Test the strict flag."""
        vcf = tmp_path / "broken.vcf"
        vcf.write_text("BEGIN:VCARD\nUID:a\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["import", str(vcf), "--strict"])

        assert exc_info.value.code == 1


class TestValidateAndSummary:
    """The validate and summary commands."""

    def test_validate_ok(self, org_file, capsys):
        """Test validating a clean document."""
        main(["validate", str(org_file)])

        assert "OK" in capsys.readouterr().out

    def test_validate_errors(self, tmp_path, capsys):
        """Test validating a broken document."""
        path = tmp_path / "bad.yaml"
        path.write_text("people:\n  - uid: a\n    jobs:\n      - fte: 3\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(path)])

        assert exc_info.value.code == 1
        assert "OutOfRangeValue" in capsys.readouterr().out

    def test_summary(self, org_file, capsys):
        """Test the summary output."""
        main(["summary", str(org_file)])
        summary = json.loads(capsys.readouterr().out)

        assert summary == {
            "total_people": 2,
            "organizations": ["Acme"],
            "titles": ["CTO", "Director"],
            "has_multi_hat": True,
        }
