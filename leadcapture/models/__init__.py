# Models package - one table per submission kind
from leadcapture.models.contact import Contact
from leadcapture.models.consultation import Consultation
from leadcapture.models.service_inquiry import ServiceInquiry
