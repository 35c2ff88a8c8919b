"""
URL configuration.

HTTP 라우팅은 이 서비스의 범위 밖이며, 배포 점검용 헬스체크만 노출합니다.
"""

from django.http import JsonResponse
from django.urls import path
from django.views.decorators.http import require_http_methods


@require_http_methods(["GET"])
def health_check(request):
    """헬스체크 엔드포인트"""
    return JsonResponse({"status": "healthy", "message": "Service is running"})


urlpatterns = [
    path("health/", health_check, name="health_check"),
]
