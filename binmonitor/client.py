"""
Bin Monitor API Client

Thin wrapper over the action endpoint for scripts and other services.
"""

import logging

import requests

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """The API could not be reached or answered with ``success: false``."""
    
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BinApiClient:
    """Client for the ``/api`` action endpoint.
    
    Args:
        base_url: Endpoint URL, e.g. ``http://127.0.0.1:5000/api``
        timeout: Seconds to wait for each request
        session: Optional ``requests.Session`` (or compatible object)
    """
    
    def __init__(self, base_url, timeout=6, session=None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
    
    def _get(self, action, **params):
        params['action'] = action
        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiRequestError(f'Request for {action} failed: {e}') from e
        return self._handle(action, resp)
    
    def _post(self, action, **data):
        data['action'] = action
        try:
            resp = self.session.post(self.base_url, data=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiRequestError(f'Request for {action} failed: {e}') from e
        return self._handle(action, resp)
    
    @staticmethod
    def _handle(action, resp):
        try:
            payload = resp.json()
        except ValueError:
            raise ApiRequestError(f'{action}: response is not JSON', resp.status_code) from None
        
        if not payload.get('success'):
            message = payload.get('message') or 'Request failed.'
            logger.debug('%s failed (%s): %s', action, resp.status_code, message)
            raise ApiRequestError(message, resp.status_code)
        return payload
    
    # Reads
    
    def get_bins(self):
        return self._get('get_bins')['data']
    
    def get_deleted_bins(self):
        return self._get('get_deleted_bins')['data']
    
    def get_bin_details(self, bin_id):
        return self._get('get_bin_details', bin_id=bin_id)['data']
    
    def get_bin_locations(self):
        return self._get('get_bin_locations')['data']
    
    # Writes
    
    def add_bin(self):
        return self._post('add_bin')['newBin']
    
    def delete_bin(self, bin_id):
        return self._post('delete_bin', bin_id=bin_id)['message']
    
    def recover_bin(self, bin_id):
        return self._post('recover_bin', bin_id=bin_id)['recoveredBin']
    
    def update_bin_detail(self, bin_id, field, value):
        return self._post('update_bin_detail', bin_id=bin_id, field=field, value=value)['message']
    
    def add_sensor(self, bin_id, sensor_name):
        return self._post('add_sensor', bin_id=bin_id, sensor_name=sensor_name)['newSensor']
    
    def delete_sensor(self, sensor_id):
        return self._post('delete_sensor', sensor_id=sensor_id)['message']
    
    def update_sensor_reading(self, sensor_id, value):
        return self._post('update_sensor_reading', sensor_id=sensor_id, value=value)
    
    def submit_contact(self, name, email, message):
        return self._post('submit_contact', contact_name=name,
                          contact_email=email, contact_message=message)['message']
