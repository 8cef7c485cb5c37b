#!/usr/bin/env python3
import json
import sys
from datetime import datetime

import requests

import config


def health_check(url=None, timeout=5):
    """Probe the registration service health endpoint"""
    url = url or config.HEALTH_URL
    try:
        response = requests.get(url, timeout=timeout)
        healthy = response.status_code == 200 and response.text.strip() == 'OK'
        return {
            'status': 'healthy' if healthy else 'unhealthy',
            'url': url,
            'status_code': response.status_code,
            'timestamp': datetime.now().isoformat(),
            'service': 'registration-web',
        }
    except requests.exceptions.RequestException as e:
        return {
            'status': 'unhealthy',
            'url': url,
            'error': str(e),
            'timestamp': datetime.now().isoformat(),
            'service': 'registration-web',
        }


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    health_data = health_check(argv[0] if argv else None)
    print(json.dumps(health_data))
    return 0 if health_data['status'] == 'healthy' else 1


if __name__ == '__main__':
    sys.exit(main())
