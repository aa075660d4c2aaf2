# tests/unit/test_contract_script.py
"""
Tests for script contract descriptors.
"""

import sys
from pathlib import Path

import pytest

from stubkit.converter.script import ContractScriptInterpreter, is_contract_script
from stubkit.core.exceptions import ContractConversionError

CONTRACT_OBJECT_SCRIPT = """\
from stubkit.core.contract import Contract

contract = Contract(
    request={"method": "POST", "url": "/orders"},
    response={"status": 201},
)
"""

CONTRACT_LIST_SCRIPT = """\
contracts = [
    {"request": {"method": "GET", "url": "/orders/%d" % i}, "response": {"status": 200}}
    for i in range(3)
]
"""


@pytest.fixture
def interpreter() -> ContractScriptInterpreter:
    return ContractScriptInterpreter()


def _convert(interpreter, path: Path):
    return interpreter.convert_as_collection(path.parent, path)


class TestIsContractScript:
    def test_python_file(self, write_file):
        assert is_contract_script(write_file("shouldCreateOrder.py", "contract = None"))

    def test_other_extension(self, write_file):
        assert not is_contract_script(write_file("order.yml", ""))

    def test_missing_file(self, tmp_path: Path):
        assert not is_contract_script(tmp_path / "missing.py")

    def test_directory(self, tmp_path: Path):
        (tmp_path / "pkg.py").mkdir()

        assert not is_contract_script(tmp_path / "pkg.py")


class TestConvertAsCollection:
    def test_single_contract_object(self, interpreter, write_file):
        path = write_file("create_order.py", CONTRACT_OBJECT_SCRIPT)

        [contract] = _convert(interpreter, path)

        assert contract.name == "create_order"
        assert contract.request.method == "POST"
        assert contract.response.status == 201
        assert contract.source_file == path

    def test_contract_list_of_mappings(self, interpreter, write_file):
        path = write_file("orders.py", CONTRACT_LIST_SCRIPT)

        contracts = _convert(interpreter, path)

        assert [c.request.url for c in contracts] == ["/orders/0", "/orders/1", "/orders/2"]
        assert [c.name for c in contracts] == ["orders_0", "orders_1", "orders_2"]

    def test_script_without_contracts(self, interpreter, write_file):
        path = write_file("helpers.py", "BASE_URL = '/orders'\n")

        assert _convert(interpreter, path) == []

    def test_imports_shared_definitions_from_parent(self, interpreter, write_file):
        write_file("billing/shared_billing_defs.py", "INVOICE_URL = '/invoices'\n")
        path = write_file(
            "billing/get_invoices.py",
            "from shared_billing_defs import INVOICE_URL\n"
            "contract = {'request': {'method': 'GET', 'url': INVOICE_URL},"
            " 'response': {'status': 200}}\n",
        )

        [contract] = _convert(interpreter, path)

        assert contract.request.url == "/invoices"
        assert str(path.parent) not in sys.path
        assert "shared_billing_defs" not in sys.modules

    def test_same_named_helpers_resolve_per_directory(self, interpreter, write_file):
        scripts = []
        for team in ("billing", "shipping"):
            write_file(f"{team}/shared_defs.py", f"BASE_URL = '/{team}'\n")
            scripts.append(
                write_file(
                    f"{team}/get_status.py",
                    "from shared_defs import BASE_URL\n"
                    "contract = {'request': {'method': 'GET', 'url': BASE_URL + '/status'},"
                    " 'response': {'status': 200}}\n",
                )
            )

        urls = [_convert(interpreter, path)[0].request.url for path in scripts]

        assert urls == ["/billing/status", "/shipping/status"]
        assert "shared_defs" not in sys.modules

    def test_helper_imported_by_failing_script_is_released(self, interpreter, write_file):
        write_file("billing/failing_defs.py", "BASE_URL = '/billing'\n")
        path = write_file(
            "billing/broken_status.py",
            "from failing_defs import BASE_URL\nraise RuntimeError(BASE_URL)\n",
        )

        with pytest.raises(ContractConversionError, match="RuntimeError: /billing"):
            _convert(interpreter, path)

        assert "failing_defs" not in sys.modules

    def test_system_exit_is_wrapped(self, interpreter, write_file):
        path = write_file("exiting.py", "import sys\nsys.exit(3)\n")

        with pytest.raises(ContractConversionError, match="SystemExit: 3") as exc_info:
            _convert(interpreter, path)

        assert exc_info.value.source == path
        assert isinstance(exc_info.value.cause, SystemExit)

    def test_script_error_is_wrapped(self, interpreter, write_file):
        path = write_file("broken.py", "raise RuntimeError('boom')\n")

        with pytest.raises(ContractConversionError, match="RuntimeError: boom") as exc_info:
            _convert(interpreter, path)

        assert exc_info.value.source == path
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_syntax_error_is_wrapped(self, interpreter, write_file):
        path = write_file("broken.py", "contract = {\n")

        with pytest.raises(ContractConversionError, match="SyntaxError"):
            _convert(interpreter, path)

    def test_invalid_contract_is_rejected(self, interpreter, write_file):
        path = write_file("invalid.py", "contract = {'request': {'method': 'GET'}}\n")

        with pytest.raises(ContractConversionError, match="position 0"):
            _convert(interpreter, path)

    def test_contracts_must_be_iterable(self, interpreter, write_file):
        path = write_file("scalar.py", "contracts = 42\n")

        with pytest.raises(ContractConversionError, match="iterable"):
            _convert(interpreter, path)

    def test_single_mapping_in_contracts_rejected(self, interpreter, write_file):
        path = write_file(
            "mapping.py",
            "contracts = {'request': {'method': 'GET', 'url': '/'}, 'response': {'status': 200}}\n",
        )

        with pytest.raises(ContractConversionError, match="iterable"):
            _convert(interpreter, path)
