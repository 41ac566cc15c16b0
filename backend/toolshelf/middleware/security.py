from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


#Adds standard security headers to every response
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach browser hardening headers to every response."""

    headers = {
        "X-Content-Type-Options": "nosniff",  #Prevents browsers from interpreting files as a different MIME type.
        "X-Frame-Options": "DENY",  #Prevents clickjacking by disallowing embedding in iframes.
        "Referrer-Policy": "same-origin",
    }

    def __init__(self, app, hsts: bool = False):
        super().__init__(app)
        self.hsts = hsts

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers[name] = value
        if self.hsts:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains" #Forces HTTPS for a year.
        return response
