import pytest
import yaml
from conftest import FakeRunner

from sifbox.commands.errors import (
    ConfigGenerationFailed,
    ConfigParseFailed,
    ExternalCommandFailed,
)
from sifbox.commands.network.generator import (
    NetworkConfigGenerator,
    load_network_config,
)
from sifbox.commands.network.models import ValidatorRecord


async def generate(runner, tmp_path):
    generator = NetworkConfigGenerator("/go/bin/sifgen", runner)
    return await generator.generate(
        "localnet", 2, str(tmp_path / "net"), "10.10.1.1", str(tmp_path / "network.yml")
    )


@pytest.mark.asyncio
async def test_generate_invokes_sifgen_once_and_parses_records(tmp_path):
    runner = FakeRunner(
        validators=[
            {"moniker": "val0", "mnemonic": "m0", "password": "p0"},
            {"moniker": "val1", "mnemonic": "m1", "password": "p1"},
        ]
    )

    records = await generate(runner, tmp_path)

    assert records == [
        ValidatorRecord("val0", "m0", "p0"),
        ValidatorRecord("val1", "m1", "p1"),
    ]
    assert runner.calls == [
        (
            "/go/bin/sifgen",
            [
                "network",
                "create",
                "--keyring-backend",
                "test",
                "localnet",
                "2",
                str(tmp_path / "net"),
                "10.10.1.1",
                str(tmp_path / "network.yml"),
            ],
            None,
        )
    ]


@pytest.mark.asyncio
async def test_generator_failure_is_config_generation_failed(tmp_path):
    runner = FakeRunner(fail_on="network create")

    with pytest.raises(ConfigGenerationFailed) as excinfo:
        await generate(runner, tmp_path)

    assert isinstance(excinfo.value, ExternalCommandFailed)
    assert excinfo.value.code == "CONFIG_GENERATION_FAILED"
    assert excinfo.value.program == "/go/bin/sifgen"
    assert len(runner.calls) == 1


@pytest.mark.asyncio
async def test_zero_records_is_a_parse_failure(tmp_path):
    runner = FakeRunner(validators=[])

    with pytest.raises(ConfigParseFailed, match="no validator records"):
        await generate(runner, tmp_path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigParseFailed) as excinfo:
        load_network_config(str(tmp_path / "absent.yml"))
    assert excinfo.value.config_file == str(tmp_path / "absent.yml")


@pytest.mark.parametrize(
    "content",
    [
        "moniker: val0\nmnemonic: m0\n",
        "- just a string\n",
        "- moniker: val0\n  password: p0\n",
        "- moniker: ''\n  mnemonic: m0\n",
        "[unclosed",
    ],
)
def test_malformed_topology(tmp_path, content):
    config_file = tmp_path / "network.yml"
    config_file.write_text(content)

    with pytest.raises(ConfigParseFailed):
        load_network_config(str(config_file))


def test_password_is_optional(tmp_path):
    config_file = tmp_path / "network.yml"
    config_file.write_text(yaml.safe_dump([{"moniker": "val0", "mnemonic": "m0"}]))

    assert load_network_config(str(config_file)) == [ValidatorRecord("val0", "m0", "")]


def test_non_utf8_topology(tmp_path):
    config_file = tmp_path / "network.yml"
    config_file.write_bytes(b"- moniker: val\xff0\n  mnemonic: m0\n")

    with pytest.raises(ConfigParseFailed) as excinfo:
        load_network_config(str(config_file))
    assert excinfo.value.config_file == str(config_file)


def test_directory_is_not_a_topology(tmp_path):
    with pytest.raises(ConfigParseFailed, match="Cannot read"):
        load_network_config(str(tmp_path))
