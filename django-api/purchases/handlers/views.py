"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain import AccountId, TicketRequest
from purchases.domain.errors import PurchaseRejectedError
from purchases.handlers.serializers import PurchaseOutcomeSerializer, PurchaseRequestSerializer
from purchases.services import build_purchase_orchestrator


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        data = serializer.validated_data

        try:
            AccountId(data["account_id"])
            ticket_requests = [
                TicketRequest(ticket["type"], ticket["count"]) for ticket in data["tickets"]
            ]
            outcome = build_purchase_orchestrator().purchase(
                data["account_id"], ticket_requests
            )
        except PurchaseRejectedError as exc:
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return Response(
            PurchaseOutcomeSerializer(outcome).data, status=status.HTTP_201_CREATED
        )
