import json
import azure.functions as func

from integral_request import RequestError, parse_request, serve_request

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


@app.route(route="numericalintegralservice/{lower}/{upper}", methods=["GET"])
def numericalintegralservice(req: func.HttpRequest) -> func.HttpResponse:
    lower = req.route_params.get("lower")
    upper = req.route_params.get("upper")

    # same validation as the Flask service
    try:
        integral_request = parse_request(lower, upper, req.params)
        payload = serve_request(integral_request)
    except RequestError as e:
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            status_code=400,
            mimetype="application/json",
        )

    return func.HttpResponse(
        json.dumps(payload),
        status_code=200,
        mimetype="application/json",
    )
