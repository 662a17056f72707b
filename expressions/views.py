import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import CompileDocumentSerializer, LineResultSerializer
from .dsl.ast_nodes import ResultType
from .utils import evaluate_document

logger = logging.getLogger(__name__)


class CompileDocumentAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CompileDocumentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        lines = evaluate_document(serializer.validated_data["document"])
        error_count = sum(1 for line in lines if line["type"] == ResultType.ERROR.value)
        logger.info(f"Compiled document: {len(lines)} lines, {error_count} errors")

        return Response(
            {
                "status": 200,
                "data": {
                    "results": LineResultSerializer(lines, many=True).data,
                    "error_count": error_count,
                },
            },
            status=status.HTTP_200_OK,
        )
