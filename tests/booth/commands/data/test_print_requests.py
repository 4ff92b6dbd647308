import unittest
from unittest.mock import patch

from mintbooth.booth.commands.data.create_print_request import (
    CreatePrintRequest,
    NewPrintRequest,
    find_print_request,
)
from mintbooth.booth.commands.data.queries.get_print_request import GetPrintRequest
from mintbooth.booth.commands.data.queries.search_print_requests import (
    PrintRequestSearchRequest,
    SearchPrintRequests,
    parse_page_limit,
    parse_status_filter,
)
from mintbooth.booth.commands.data.settings import GetOrInitSettings, UpdateSettings
from mintbooth.booth.commands.data.update_print_request_status import (
    PrintRequestStatusUpdate,
    UpdatePrintRequestStatus,
)
from mintbooth.booth.domain.print_request import PrintRequestStatus, TShirtSize
from mintbooth.booth.domain.settings import SettingsUpdate
from mintbooth.booth.errors import (
    BoothFull,
    BoothPaused,
    PrintRequestAlreadyExists,
    PrintRequestNotFound,
    ValidationError,
)
from tests.algorand.test_support import generate_test_account
from tests.test_support import BoothDataTestCase


class PrintRequestsTestCase(BoothDataTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.get_or_init_settings = GetOrInitSettings(self.session_factory)
        self.update_settings = UpdateSettings(self.session_factory)
        self.create_print_request = CreatePrintRequest(
            self.session_factory, self.get_or_init_settings
        )
        self.get_print_request = GetPrintRequest(self.session_factory)
        self.search_print_requests = SearchPrintRequests(self.session_factory)
        self.update_print_request_status = UpdatePrintRequestStatus(
            self.session_factory
        )

    def create_print_requests(self, count: int) -> list:
        print_requests = []
        for i in range(count):
            _private_key, wallet = generate_test_account()
            print_requests.append(
                self.create_print_request(NewPrintRequest.parse(wallet, 1000 + i, "L"))
            )
        return print_requests

    def test_new_print_request_validation(self):
        _private_key, wallet = generate_test_account()

        request = NewPrintRequest.parse(wallet, 12345, "XL")
        self.assertEqual("12345", request.asset_id)
        self.assertEqual(TShirtSize.XL, request.tshirt_size)

        for wallet_address, asset_id in [
            (None, 1),
            ("", 1),
            (wallet, None),
            (wallet, 0),
            (wallet, ""),
        ]:
            with self.subTest(wallet_address=wallet_address, asset_id=asset_id):
                with self.assertRaises(ValidationError) as err:
                    NewPrintRequest.parse(wallet_address, asset_id, "M")
                self.assertEqual(
                    "wallet_address and asset_id are required", err.exception.message
                )

        for size in [None, "XXL", "m"]:
            with self.subTest(size=size):
                with self.assertRaises(ValidationError) as err:
                    NewPrintRequest.parse(wallet, 1, size)
                self.assertIn("S, M, L, XL", err.exception.message)

    def test_create_print_request(self):
        _private_key, wallet = generate_test_account()
        print_request = self.create_print_request(
            NewPrintRequest.parse(wallet, 42, "S")
        )
        self.assertEqual(wallet, print_request.wallet_address)
        self.assertEqual("42", print_request.asset_id)
        self.assertEqual(TShirtSize.S, print_request.tshirt_size)
        self.assertEqual(PrintRequestStatus.PENDING, print_request.status)

        self.assertEqual(print_request, self.get_print_request(wallet))

        with self.subTest("wallet can have only one print request"):
            with self.assertRaises(PrintRequestAlreadyExists) as err:
                self.create_print_request(NewPrintRequest.parse(wallet, 43, "M"))
            self.assertEqual(print_request, err.exception.print_request)
            self.assertEqual(1, self.search_print_requests(PrintRequestSearchRequest()).total_count)

    def test_concurrent_duplicate_is_reported_as_already_exists(self):
        _private_key, wallet = generate_test_account()
        existing = self.create_print_request(NewPrintRequest.parse(wallet, 1, "M"))

        # simulates losing the race, i.e., the existence check misses the row that was inserted concurrently
        lookups = []

        def find_after_losing_race(session, wallet_address):
            lookups.append(wallet_address)
            if len(lookups) == 1:
                return None
            return find_print_request(session, wallet_address)

        with patch(
            "mintbooth.booth.commands.data.create_print_request.find_print_request",
            side_effect=find_after_losing_race,
        ):
            with self.assertRaises(PrintRequestAlreadyExists) as err:
                self.create_print_request(NewPrintRequest.parse(wallet, 2, "M"))

        self.assertEqual(2, len(lookups))
        self.assertEqual(existing, err.exception.print_request)
        self.assertEqual(existing, self.get_print_request(wallet))

    def test_paused_booth(self):
        self.update_settings(SettingsUpdate(is_paused=True))
        _private_key, wallet = generate_test_account()
        with self.assertRaises(BoothPaused) as err:
            self.create_print_request(NewPrintRequest.parse(wallet, 1, "M"))
        self.assertEqual("booth_paused", err.exception.reason)
        self.assertIsNone(self.get_print_request(wallet))

    def test_full_booth(self):
        self.update_settings(SettingsUpdate(max_print_requests=2))
        self.create_print_requests(2)

        _private_key, wallet = generate_test_account()
        with self.assertRaises(BoothFull) as err:
            self.create_print_request(NewPrintRequest.parse(wallet, 1, "M"))
        self.assertEqual("booth_full", err.exception.reason)

        with self.subTest("capacity is checked against the current count"):
            self.update_settings(SettingsUpdate(max_print_requests=3))
            self.create_print_request(NewPrintRequest.parse(wallet, 1, "M"))

        with self.subTest("lowering capacity does not delete print requests"):
            result = self.update_settings(SettingsUpdate(max_print_requests=1))
            self.assertEqual(3, result.current_count)

    def test_pause_is_checked_before_capacity(self):
        self.update_settings(SettingsUpdate(max_print_requests=1))
        self.create_print_requests(1)
        self.update_settings(SettingsUpdate(is_paused=True))

        _private_key, wallet = generate_test_account()
        with self.assertRaises(BoothPaused):
            self.create_print_request(NewPrintRequest.parse(wallet, 1, "M"))

    def test_first_print_request_initializes_settings(self):
        self.create_print_requests(1)
        self.assertEqual(1, self.get_or_init_settings().id)

    def test_search_print_requests(self):
        print_requests = self.create_print_requests(5)

        with self.subTest("newest first"):
            result = self.search_print_requests(
                PrintRequestSearchRequest(page=1, limit=2, asc=False)
            )
            self.assertEqual(5, result.total_count)
            self.assertEqual(3, result.total_pages)
            self.assertEqual(
                [print_requests[4].id, print_requests[3].id],
                [print_request.id for print_request in result.print_requests],
            )

        with self.subTest("oldest first"):
            result = self.search_print_requests(
                PrintRequestSearchRequest(page=3, limit=2, asc=True)
            )
            self.assertEqual(
                [print_requests[4].id],
                [print_request.id for print_request in result.print_requests],
            )

        with self.subTest("page past the end"):
            result = self.search_print_requests(PrintRequestSearchRequest(page=10))
            self.assertEqual([], result.print_requests)
            self.assertEqual(5, result.total_count)

        with self.subTest("status filter"):
            self.update_print_request_status(
                PrintRequestStatusUpdate(print_requests[1].id, PrintRequestStatus.COMPLETED)
            )
            result = self.search_print_requests(
                PrintRequestSearchRequest(status=PrintRequestStatus.COMPLETED, asc=True)
            )
            self.assertEqual(1, result.total_count)
            self.assertEqual(print_requests[1].id, result.print_requests[0].id)

            result = self.search_print_requests(
                PrintRequestSearchRequest(status=PrintRequestStatus.PENDING, asc=True)
            )
            self.assertEqual(4, result.total_count)

    def test_empty_search(self):
        result = self.search_print_requests(PrintRequestSearchRequest())
        self.assertEqual([], result.print_requests)
        self.assertEqual(0, result.total_count)
        self.assertEqual(0, result.total_pages)

    def test_search_page_offset_too_large(self):
        self.create_print_requests(2)
        for page in [2**63 // 50 + 2, 10**20]:
            with self.subTest(page=page):
                result = self.search_print_requests(
                    PrintRequestSearchRequest(page=page, limit=50)
                )
                self.assertEqual([], result.print_requests)
                self.assertEqual(page, result.page)
                self.assertEqual(2, result.total_count)

    def test_parse_page_limit(self):
        self.assertEqual((1, 50), parse_page_limit())
        self.assertEqual((2, 10), parse_page_limit("2", "10"))
        self.assertEqual((1, 50), parse_page_limit(None, "500"))
        self.assertEqual((1, 1), parse_page_limit(None, "0"))
        self.assertEqual((1, 1), parse_page_limit(None, "-5"))

        # values that are not numbers fall back to the defaults
        self.assertEqual((1, 50), parse_page_limit("abc", "xyz"))

        for page in ["0", "-1"]:
            with self.subTest(page=page):
                with self.assertRaises(ValidationError):
                    parse_page_limit(page)

        with self.assertRaises(ValidationError) as err:
            parse_page_limit("0")
        self.assertEqual("Page must be greater than 0", err.exception.message)

    def test_parse_status_filter(self):
        self.assertEqual(PrintRequestStatus.IN_PROGRESS, parse_status_filter("in_progress"))
        for status in [None, "", "all", "bogus"]:
            with self.subTest(status=status):
                self.assertIsNone(parse_status_filter(status))

    def test_update_print_request_status(self):
        print_request = self.create_print_requests(1)[0]

        # any status may follow any status
        for status in [
            PrintRequestStatus.COLLECTED,
            PrintRequestStatus.PENDING,
            PrintRequestStatus.IN_PROGRESS,
        ]:
            with self.subTest(status=status):
                updated = self.update_print_request_status(
                    PrintRequestStatusUpdate(print_request.id, status)
                )
                self.assertEqual(status, updated.status)
                self.assertEqual(print_request.created_at, updated.created_at)
                self.assertGreaterEqual(updated.updated_at, print_request.updated_at)

        with self.subTest("print request does not exist"):
            with self.assertRaises(PrintRequestNotFound):
                self.update_print_request_status(
                    PrintRequestStatusUpdate(print_request.id + 100, PrintRequestStatus.PENDING)
                )

        with self.subTest("ID does not fit in an INTEGER column"):
            for print_request_id in [2**63, -(2**63) - 1, 10**20]:
                with self.assertRaises(PrintRequestNotFound):
                    self.update_print_request_status(
                        PrintRequestStatusUpdate(print_request_id, PrintRequestStatus.PENDING)
                    )

    def test_parse_print_request_status_update(self):
        self.assertEqual(
            PrintRequestStatusUpdate(7, PrintRequestStatus.COMPLETED),
            PrintRequestStatusUpdate.parse("7", "completed"),
        )

        for print_request_id, status, message in [
            ("1", None, "status is required"),
            ("1", "", "status is required"),
            ("abc", "completed", "Invalid ID format"),
            ("abc", "shipped", "Invalid ID format"),
            (
                "1",
                "shipped",
                "Invalid status. Must be one of: pending, in_progress, completed, collected",
            ),
        ]:
            with self.subTest(print_request_id=print_request_id, status=status):
                with self.assertRaises(ValidationError) as err:
                    PrintRequestStatusUpdate.parse(print_request_id, status)
                self.assertEqual(message, err.exception.message)


if __name__ == "__main__":
    unittest.main()
