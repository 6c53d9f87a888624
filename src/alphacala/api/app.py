from flask import Flask, jsonify, Response
from flask_smorest import Api
from flask_cors import CORS

from alphacala import config
from alphacala.api.routes import bp

SWAGGER_CSS = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui.css"
SWAGGER_BUNDLE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-bundle.js"
SWAGGER_STANDALONE = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/swagger-ui-standalone-preset.js"

def create_app():
    app = Flask(__name__)

    app.config["API_TITLE"] = "AlphaCala (Flask)"
    app.config["API_VERSION"] = "v1"
    app.config["OPENAPI_VERSION"] = "3.0.3"

    api = Api(app)
    api.register_blueprint(bp)

    # UI origins allowed to call /api/*
    CORS(app, resources={r"/api/*": {"origins": config.CORS_ORIGINS}})

    # --- Manual docs: /openapi.json + /apidocs --------------------------------
    @app.get("/openapi.json")
    def openapi_json():
        return jsonify(api.spec.to_dict())

    @app.get("/apidocs")
    def apidocs():
        html = f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8"/>
    <title>AlphaCala API Docs</title>
    <link rel="stylesheet" href="{SWAGGER_CSS}">
    <style>body {{ margin:0; background:#fafafa; }}</style>
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="{SWAGGER_BUNDLE}"></script>
    <script src="{SWAGGER_STANDALONE}"></script>
    <script>
      window.onload = () => {{
        SwaggerUIBundle({{
          url: "/openapi.json",
          dom_id: "#swagger-ui",
          presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
          layout: "StandaloneLayout"
        }});
      }};
    </script>
  </body>
</html>"""
        return Response(html, mimetype="text/html")
    # --------------------------------------------------------------------------

    app.logger.info("AlphaCala API ready (search depth cap %d)", config.API_DEPTH)
    return app

if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8000, debug=True)
