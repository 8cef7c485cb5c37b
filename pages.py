import platform
import socket
from datetime import datetime

from flask import render_template_string

import registrations

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ company }} Registration</title>
    <link rel="stylesheet" href="https://maxcdn.bootstrapcdn.com/bootstrap/3.3.7/css/bootstrap.min.css">
    <style>
        body {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            font-family: 'Arial', sans-serif;
        }
        .container { padding-top: 50px; }
        .jumbotron {
            background: rgba(255, 255, 255, 0.95);
            border-radius: 15px;
            box-shadow: 0 8px 32px rgba(0, 0, 0, 0.1);
        }
        .server-info {
            background: #f8f9fa;
            padding: 10px;
            border-radius: 5px;
            margin-bottom: 20px;
            font-size: 12px;
            color: #6c757d;
        }
        .form-control {
            border-radius: 8px;
            border: 2px solid #e1e5e9;
            transition: all 0.3s ease;
        }
        .form-control:focus {
            border-color: #667eea;
            box-shadow: 0 0 0 0.2rem rgba(102, 126, 234, 0.25);
        }
        .btn-primary {
            background: linear-gradient(45deg, #667eea, #764ba2);
            border: none;
            border-radius: 8px;
            padding: 12px 30px;
            font-weight: 600;
        }
        .alert { margin-top: 20px; }
    </style>
</head>
<body>
<div class="container">
    <div class="jumbotron">
        <div class="server-info">
            <strong>Server:</strong> {{ info.hostname }} |
            <strong>Status:</strong> Running |
            <strong>Load Balancer:</strong> Active |
            <strong>Time:</strong> {{ info.time }}
        </div>

        <h2 class="text-center" style="color: #667eea; margin-bottom: 30px;">
            🚀 {{ company }} Registration
        </h2>

        {% if alert %}
        <div class="alert alert-{{ alert.level }}">
            <h4>{{ alert.title }}</h4>
            {% if alert.level == 'success' %}
            <p><strong>{{ alert.firstname }}</strong>, your registration has been saved successfully!</p>
            <p><small>Email: {{ alert.email }}</small></p>
            <p><small>Processed by server: {{ info.hostname }}</small></p>
            {% elif alert.level == 'warning' %}
            <p>Your information could not be saved at this time. Please try again later.</p>
            <p><small>Server: {{ info.hostname }} | Time: {{ info.time }}</small></p>
            {% else %}
            <p>Please fill in all required fields.</p>
            {% endif %}
        </div>
        {% endif %}

        <form method="post" class="form-horizontal">
            <div class="form-group">
                <label for="firstname" class="col-sm-3 control-label">Full Name:</label>
                <div class="col-sm-9">
                    <input type="text" class="form-control" id="firstname" name="firstname"
                           placeholder="Enter your full name" required>
                </div>
            </div>

            <div class="form-group">
                <label for="email" class="col-sm-3 control-label">Email Address:</label>
                <div class="col-sm-9">
                    <input type="email" class="form-control" id="email" name="email"
                           placeholder="Enter your email address" required>
                </div>
            </div>

            <div class="form-group">
                <div class="col-sm-offset-3 col-sm-9">
                    <button type="submit" class="btn btn-primary btn-lg">📝 Submit Registration</button>
                </div>
            </div>
        </form>

        <div class="row" style="margin-top: 30px;">
            <div class="col-sm-6">
                <div class="panel panel-info">
                    <div class="panel-heading"><h4>🔧 System Info</h4></div>
                    <div class="panel-body">
                        <small>
                            <strong>Instance:</strong> {{ info.hostname }}<br>
                            <strong>Python Version:</strong> {{ info.python_version }}<br>
                            <strong>Database Driver ({{ info.driver }}):</strong> {{ '✅ Available' if info.driver_available else '❌ Missing' }}<br>
                            <strong>Server Software:</strong> {{ info.server_software }}
                        </small>
                    </div>
                </div>
            </div>
            <div class="col-sm-6">
                <div class="panel panel-success">
                    <div class="panel-heading"><h4>✅ Features Active</h4></div>
                    <div class="panel-body">
                        <small>
                            {% for name, value in features %}
                            ✓ {{ name }}: {{ value }}<br>
                            {% endfor %}
                        </small>
                    </div>
                </div>
            </div>
        </div>
    </div>
</div>
</body>
</html>
"""

ALERT_TITLES = {
    registrations.SUCCESS: ('success', '✅ Success!'),
    registrations.UNAVAILABLE: ('warning', '⚠️ Database Temporarily Unavailable'),
    registrations.INVALID: ('danger', '❌ Invalid Input'),
}


def server_info(driver, driver_available, server_software):
    """Live environment values shown on the page; display only"""
    return {
        'hostname': socket.gethostname(),
        'time': datetime.now().astimezone().strftime('%Y-%m-%d %H:%M:%S %Z'),
        'python_version': platform.python_version(),
        'driver': driver,
        'driver_available': driver_available,
        'server_software': server_software,
    }


def feature_flags(driver_available):
    return [
        ('Load Balancer', 'Active'),
        ('Auto Scaling', 'Active'),
        ('Database Integration', 'Ready' if driver_available else 'Error'),
        ('High Availability', 'Multi-AZ'),
        ('GitHub Deployment', 'Gist'),
    ]


def build_alert(result):
    """Map a registration outcome to the alert block shown above the form"""
    if result is None:
        return None
    level, title = ALERT_TITLES[result['status']]
    return {
        'level': level,
        'title': title,
        'firstname': result['firstname'],
        'email': result['email'],
    }


def render_page(company, driver, driver_available, server_software, result=None):
    """Render the registration page; values are autoescaped by Jinja"""
    return render_template_string(
        HTML_TEMPLATE,
        company=company,
        info=server_info(driver, driver_available, server_software),
        features=feature_flags(driver_available),
        alert=build_alert(result),
    )
