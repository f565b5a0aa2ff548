import pytest

from ixc.account_id import ROOT_ACCOUNT, AccountID
from ixc.code import ErrorCode, SystemCode
from ixc.gas import Gas
from ixc.handler import HostBackend, InvokeParams, RawHandler
from ixc.message import Message, Request, Response

SET = 1
GET = 2


class MemoryBackend(HostBackend):
    def __init__(self, gas_limit=0):
        self.state = {}
        self.gas = Gas.limited(gas_limit)

    def invoke_msg(self, message, invoke_params):
        raise ErrorCode(SystemCode.ACCOUNT_NOT_FOUND)

    def invoke_query(self, message, invoke_params):
        raise ErrorCode(SystemCode.ACCOUNT_NOT_FOUND)

    def update_state(self, request, invoke_params):
        self.state[request.in1.expect_bytes()] = request.in2.expect_bytes()
        return Response()

    def query_state(self, request, invoke_params):
        return Response(self.state.get(request.in1.expect_bytes(), b""))

    def consume_gas(self, amount):
        self.gas.consume(amount)


class StoreHandler(RawHandler):
    def handle_msg(self, caller, message, callbacks):
        callbacks.consume_gas(10)
        req = message.request
        callbacks.update_state(Request(SET, req.in1, req.in2), InvokeParams())
        return Response(caller)

    def handle_query(self, message, callbacks):
        return callbacks.query_state(Request(GET, message.request.in1), InvokeParams())


def test_backend_is_abstract():
    with pytest.raises(TypeError):
        HostBackend()


@pytest.mark.parametrize(
    "call",
    [
        lambda h, m, b: h.handle_msg(ROOT_ACCOUNT, m, b),
        lambda h, m, b: h.handle_query(m, b),
        lambda h, m, b: h.handle_system(ROOT_ACCOUNT, m, b),
    ],
)
def test_default_handler_does_not_handle(call):
    msg = Message(AccountID(5), Request(1))
    with pytest.raises(ErrorCode) as info:
        call(RawHandler(), msg, MemoryBackend())
    assert info.value.system_code is SystemCode.MESSAGE_NOT_HANDLED


def test_handler_uses_backend():
    backend = MemoryBackend()
    handler = StoreHandler()
    msg = Message(AccountID(5), Request(SET, b"k", b"v"))
    resp = handler.handle_msg(AccountID(8), msg, backend)
    assert resp.out1.expect_account_id() == AccountID(8)
    query = Message(AccountID(5), Request(GET, b"k"))
    assert handler.handle_query(query, backend).out1.expect_bytes() == b"v"


def test_handler_runs_out_of_gas():
    backend = MemoryBackend(gas_limit=5)
    msg = Message(AccountID(5), Request(SET, b"k", b"v"))
    with pytest.raises(ErrorCode) as info:
        StoreHandler().handle_msg(ROOT_ACCOUNT, msg, backend)
    assert info.value.system_code is SystemCode.OUT_OF_GAS
    assert backend.state == {}


def test_invoke_params_default_gas():
    assert InvokeParams().gas is None
    gas = Gas.limited(100)
    assert InvokeParams(gas).gas is gas