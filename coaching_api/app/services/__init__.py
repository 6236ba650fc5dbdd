"""
Service layer abstraction.

Each service encapsulates the business logic for one concern (admin
authentication, inquiry lifecycle, statistics).  Services receive the
``InquiryStore`` explicitly so that handlers stay thin and tests can
drive the logic without going through HTTP.
"""
