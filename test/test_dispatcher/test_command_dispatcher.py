import json
import logging

import pytest
import structlog

from chefflow.config import DispatcherConfig
from chefflow.core.enums import CommandType
from chefflow.core.exceptions import UnknownCommandError
from chefflow.dispatcher import CommandDispatcher
from chefflow.order_queue import KitchenQueue


def snapshot_ids(response):
    return [entry["id"] for entry in json.loads(response)]


class TestInsertCommands:
    """ADD and VIP commands."""

    def test_add_renders_full_snapshot(self, dispatcher):
        response = dispatcher.dispatch("ADD,1,Burger,10")
        assert response == '[{"id":1,"items":"Burger","isVip":false,"isExpress":false,"prepTime":10}]'

    def test_vip_with_express_flag(self, dispatcher):
        response = dispatcher.dispatch("VIP,2,Lobster,30,true")
        assert response == '[{"id":2,"items":"Lobster","isVip":true,"isExpress":true,"prepTime":30}]'

    def test_command_name_is_case_insensitive(self, dispatcher):
        dispatcher.dispatch("add,1,Burger,10")
        dispatcher.dispatch("Vip,2,Soup,1")
        assert snapshot_ids(dispatcher.dispatch("print")) == [2, 1]

    @pytest.mark.parametrize("flag, expected", [
        ("true", True),
        ("TRUE", True),
        ("True", True),
        ("false", False),
        ("yes", False),
        ("1", False),
    ])
    def test_express_flag_parsing(self, dispatcher, flag, expected):
        response = dispatcher.dispatch(f"ADD,1,Fries,3,{flag}")
        assert json.loads(response)[0]["isExpress"] is expected

    def test_extra_fields_are_ignored(self, dispatcher):
        response = dispatcher.dispatch("ADD,1,Fries,3,false,extra,fields")
        assert snapshot_ids(response) == [1]

    def test_items_are_json_escaped(self, dispatcher):
        response = dispatcher.dispatch('ADD,1,Say "cheese" \\ please,3')
        assert json.loads(response)[0]["items"] == 'Say "cheese" \\ please'

    def test_signed_numbers_are_accepted(self, dispatcher):
        response = dispatcher.dispatch("ADD,-7,Tea,+4")
        entry = json.loads(response)[0]
        assert entry["id"] == -7
        assert entry["prepTime"] == 4

    def test_integer_range_bounds(self, dispatcher):
        dispatcher.dispatch("ADD,2147483647,Tea,0")
        dispatcher.dispatch("ADD,-2147483648,Tea,2147483647")
        assert snapshot_ids(dispatcher.dispatch("PRINT")) == [2147483647, -2147483648]

    @pytest.mark.parametrize("line, reason", [
        ("ADD,1,Burger", "INVALID_ADD_FORMAT"),
        ("ADD", "INVALID_ADD_FORMAT"),
        ("VIP,1,Burger", "INVALID_VIP_FORMAT"),
        ("ADD,x,Burger,10", "INVALID_NUMBER_FORMAT"),
        ("ADD,1,Burger,ten", "INVALID_NUMBER_FORMAT"),
        ("VIP,1,Burger,1.5", "INVALID_NUMBER_FORMAT"),
        ("ADD,1,Burger,-3", "INVALID_NUMBER_FORMAT"),
        ("ADD, 2,Burger,3", "INVALID_NUMBER_FORMAT"),
        ("ADD,2,Burger, 3 ,true", "INVALID_NUMBER_FORMAT"),
        ("ADD,3,Burger,99999999999", "INVALID_NUMBER_FORMAT"),
        ("ADD,2147483648,Burger,3", "INVALID_NUMBER_FORMAT"),
        ("VIP,-2147483649,Burger,3", "INVALID_NUMBER_FORMAT"),
        ("ADD,1,Burger,", "INVALID_ADD_FORMAT"),
    ])
    def test_malformed_insert(self, dispatcher, line, reason):
        assert dispatcher.dispatch(line) == f"ERROR:{reason}"
        assert len(dispatcher.queue) == 0


class TestRemovalCommands:
    """COMPLETE and CANCEL commands."""

    def test_complete_on_empty_queue(self, dispatcher):
        assert dispatcher.dispatch("COMPLETE") == "ERROR:NO_ORDERS"

    def test_cancel_on_empty_queue(self, dispatcher):
        assert dispatcher.dispatch("CANCEL,1") == "ERROR:NO_ORDERS"

    def test_cancel_unknown_order(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        assert dispatcher.dispatch("CANCEL,2") == "ERROR:ORDER_NOT_FOUND"
        assert snapshot_ids(dispatcher.dispatch("PRINT")) == [1]

    def test_cancel_without_id(self, dispatcher):
        assert dispatcher.dispatch("CANCEL") == "ERROR:INVALID_CANCEL_FORMAT"

    def test_cancel_with_bad_id(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        assert dispatcher.dispatch("CANCEL,one") == "ERROR:INVALID_NUMBER_FORMAT"

    def test_complete_removes_front(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        dispatcher.dispatch("VIP,2,Soup,5")
        assert snapshot_ids(dispatcher.dispatch("COMPLETE")) == [1]

    def test_complete_last_order_renders_empty_array(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        assert dispatcher.dispatch("COMPLETE") == "[]"

    def test_complete_ignores_extra_fields(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        dispatcher.dispatch("ADD,2,Salad,5")
        assert snapshot_ids(dispatcher.dispatch("COMPLETE,x")) == [1]
        assert snapshot_ids(dispatcher.dispatch("COMPLETE,1")) == []

    def test_complete_id(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        dispatcher.dispatch("ADD,2,Salad,5")
        assert snapshot_ids(dispatcher.dispatch("COMPLETE_ID,1")) == [2]
        assert dispatcher.dispatch("complete_id,1") == "ERROR:ORDER_NOT_FOUND"

    @pytest.mark.parametrize("line, reason", [
        ("COMPLETE_ID", "INVALID_COMPLETE_ID_FORMAT"),
        ("COMPLETE_ID,", "INVALID_COMPLETE_ID_FORMAT"),
        ("COMPLETE_ID,two", "INVALID_NUMBER_FORMAT"),
    ])
    def test_malformed_complete_id(self, dispatcher, line, reason):
        dispatcher.dispatch("ADD,2,Salad,5")
        assert dispatcher.dispatch(line) == f"ERROR:{reason}"
        assert snapshot_ids(dispatcher.dispatch("PRINT")) == [2]


class TestReadCommands:
    """PRINT and STATS commands."""

    def test_print_empty_queue(self, dispatcher):
        assert dispatcher.dispatch("PRINT") == "[]"

    def test_print_is_repeatable(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        assert dispatcher.dispatch("PRINT") == dispatcher.dispatch("PRINT")

    def test_stats(self, dispatcher):
        dispatcher.dispatch("ADD,1,Burger,10")
        dispatcher.dispatch("ADD,2,Fries,3,true")
        dispatcher.dispatch("VIP,3,Soup,4")
        response = dispatcher.dispatch("STATS")
        assert response == (
            '{"totalOrders":3,"vipOrders":1,"expressOrders":1,"normalOrders":1,'
            '"totalPrepTime":17,"avgPrepTime":6}'
        )

    def test_stats_of_empty_queue(self, dispatcher):
        assert json.loads(dispatcher.dispatch("STATS"))["avgPrepTime"] == 0


class TestLineHandling:
    """Blank lines, unknown commands and parsing."""

    @pytest.mark.parametrize("line", ["", "   ", "\n", "\t\r\n"])
    def test_blank_lines_produce_no_output(self, dispatcher, line):
        assert dispatcher.dispatch(line) is None

    @pytest.mark.parametrize("line", ["FOO", "DELETE,1", "ADDX,1,a,1", ","])
    def test_unknown_command(self, dispatcher, line):
        assert dispatcher.dispatch(line) == "ERROR:UNKNOWN_COMMAND"

    def test_surrounding_whitespace_is_stripped(self, dispatcher):
        assert snapshot_ids(dispatcher.dispatch("  ADD,1,Burger,10  \n")) == [1]

    def test_parse_line(self, dispatcher):
        parsed = dispatcher.parse_line("cancel,12")
        assert parsed.command is CommandType.CANCEL
        assert parsed.args == ["12"]

    def test_parse_line_drops_trailing_empty_fields(self, dispatcher):
        parsed = dispatcher.parse_line("CANCEL,,")
        assert parsed.args == []

    def test_parse_line_unknown(self, dispatcher):
        with pytest.raises(UnknownCommandError) as exc:
            dispatcher.parse_line("BURN,1")
        assert exc.value.token == "BURN"

    def test_log_context_carries_command_and_order(self, dispatcher, caplog):
        caplog.set_level(logging.INFO, logger="chefflow.dispatcher")
        dispatcher.dispatch("ADD,7,Tea,2")
        events = [r.msg for r in caplog.records if isinstance(r.msg, dict)]
        accepted = [e for e in events if e.get("event") == "Order accepted"]
        assert accepted[0]["order_id"] == 7
        assert accepted[0]["command"] == "ADD"

        context = structlog.contextvars.get_contextvars()
        assert "order_id" not in context
        assert "command" not in context

    def test_unexpected_failure_is_reported(self, dispatcher, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("fryer on fire")

        monkeypatch.setattr(dispatcher.queue, "insert_normal", explode)
        assert dispatcher.dispatch("ADD,1,Burger,10") == "ERROR:fryer on fire"

    def test_custom_delimiter(self):
        dispatcher = CommandDispatcher(KitchenQueue(), DispatcherConfig(field_delimiter="|"))
        assert snapshot_ids(dispatcher.dispatch("ADD|1|Fish, chips|10")) == [1]
        assert dispatcher.queue.front().items == "Fish, chips"

    def test_pretty_json(self):
        dispatcher = CommandDispatcher(KitchenQueue(), DispatcherConfig(json_compact=False))
        response = dispatcher.dispatch("ADD,1,Tea,2")
        assert response == '[{"id": 1, "items": "Tea", "isVip": false, "isExpress": false, "prepTime": 2}]'

    def test_default_queue_is_created(self):
        dispatcher = CommandDispatcher()
        assert isinstance(dispatcher.queue, KitchenQueue)
        assert dispatcher.dispatch("PRINT") == "[]"


def test_worked_example_over_the_protocol(dispatcher):
    assert snapshot_ids(dispatcher.dispatch("ADD,1,Steak,10")) == [1]
    assert snapshot_ids(dispatcher.dispatch("ADD,2,Salad,5")) == [2, 1]
    assert snapshot_ids(dispatcher.dispatch("VIP,3,Soup,1")) == [3, 2, 1]
    assert snapshot_ids(dispatcher.dispatch("ADD,4,Roast,99,true")) == [3, 4, 2, 1]
    assert snapshot_ids(dispatcher.dispatch("COMPLETE")) == [4, 2, 1]
    assert snapshot_ids(dispatcher.dispatch("CANCEL,2")) == [4, 1]
    assert dispatcher.dispatch("CANCEL,99") == "ERROR:ORDER_NOT_FOUND"
    assert snapshot_ids(dispatcher.dispatch("PRINT")) == [4, 1]
