"""
Form controller: entry point for every user edit.

Routes each change to the right sub-model and triggers the side effects:
slug regeneration on business name changes and address autofill once a
complete CEP is typed. Runs on a single asyncio event loop.
"""

import asyncio
from typing import Optional, Set

from clients.intake import IntakeClient
from clients.viacep import AddressResolver
from form.notifications import NotificationLog, NotificationSink
from form.submission import FormState, SubmissionOutcome, SubmissionPipeline
from models.business import TEXT_FIELDS
from models.professional import registration_label as authority_for
from utils.constants import POSTAL_CODE_DIGITS, REGISTRATION_NUMBER_MAX_LENGTH
from utils.exceptions import LookupFailure
from utils.formatters import digits_only, generate_slug
from utils.logging_config import setup_logging
from utils.validation import registration_number_hint

logger = setup_logging(name=__name__)

# Fields written by the address autofill
ADDRESS_FIELDS = ("city", "state", "street", "neighborhood")


class FormController:
    """Orchestrates one onboarding form session."""

    def __init__(
        self,
        resolver: Optional[AddressResolver] = None,
        intake: Optional[IntakeClient] = None,
        notify: Optional[NotificationSink] = None,
        origin: Optional[str] = None,
        form: Optional[FormState] = None,
    ):
        self.form = form or FormState()
        self.resolver = resolver or AddressResolver()
        self.notify = notify if notify is not None else NotificationLog()
        self.pipeline = SubmissionPipeline(intake or IntakeClient(), self.notify, origin)

        # Latest lookup token; responses carrying an older one are dropped
        self._lookup_token = 0
        self._lookups: Set[asyncio.Task] = set()

    # ========== Business record ==========

    def update_field(self, field: str, value: str) -> None:
        """
        Set a free-text business field.

        Changing the business name re-derives the slug unless the slug was
        edited by hand.
        """
        if field not in TEXT_FIELDS:
            raise ValueError(f"{field!r} is not a free-text business field")

        setattr(self.form.business, field, value)

        if field in ADDRESS_FIELDS:
            self._invalidate_lookups()
        if field == "business_name":
            self.form.slug.derive(generate_slug(value))

    def set_phone(self, raw: str) -> str:
        """Store the masked phone and return it."""
        self.form.business.phone = raw
        return self.form.business.phone

    def set_state(self, state: str) -> None:
        self.form.business.state = state
        self._invalidate_lookups()

    def set_postal_code(self, raw: str) -> Optional[asyncio.Task]:
        """
        Store the masked CEP; start an address lookup when exactly 8
        digits were typed.

        Returns:
            The background lookup task, if one was started
        """
        digits = digits_only(raw)
        self.form.business.cep = raw
        self._invalidate_lookups()

        if len(digits) != POSTAL_CODE_DIGITS:
            return None
        return self._start_lookup(digits)

    def set_slug(self, value: str) -> None:
        """Manual slug edit; name changes stop overriding it."""
        self.form.slug.edit(value)

    @property
    def slug(self) -> str:
        return self.form.slug.value

    # ========== Address autofill ==========

    def _invalidate_lookups(self) -> int:
        self._lookup_token += 1
        return self._lookup_token

    def _start_lookup(self, cep: str) -> Optional[asyncio.Task]:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"No running event loop, address lookup for CEP {cep} skipped")
            return None

        task = loop.create_task(self._lookup(cep, self._lookup_token))
        self._lookups.add(task)
        task.add_done_callback(self._lookups.discard)
        return task

    async def autofill_address(self, cep: str) -> bool:
        """Look up `cep` now and fill the address fields; see `_lookup`."""
        return await self._lookup(cep, self._invalidate_lookups())

    async def _lookup(self, cep: str, token: int) -> bool:
        """
        Fetch and apply an address.

        Not-found and failed lookups leave the address untouched; failures
        are logged only. A response is discarded when the CEP or an address
        field changed after the lookup was issued.

        Returns:
            True if the address fields were filled
        """
        try:
            address = await self.resolver.lookup(cep)
        except LookupFailure as e:
            logger.warning(f"Address lookup failed: {e}", exc_info=True)
            return False

        if token != self._lookup_token:
            logger.debug(f"Discarding stale address for CEP {cep}")
            return False
        if address is None:
            return False

        business = self.form.business
        for field in ADDRESS_FIELDS:
            setattr(business, field, getattr(address, field))
        logger.info(f"Address filled from CEP {cep}")
        return True

    async def wait_for_lookups(self) -> None:
        """Wait until every background lookup has finished."""
        if self._lookups:
            await asyncio.gather(*list(self._lookups))

    # ========== Professionals ==========

    def add_professional(self) -> str:
        return self.form.professionals.add()

    def remove_professional(self, professional_id: str) -> bool:
        return self.form.professionals.remove(professional_id)

    def update_professional(self, professional_id: str, field: str, value: str) -> bool:
        return self.form.professionals.update(professional_id, field, value)

    def set_registration_number(self, professional_id: str, raw: str) -> bool:
        """
        Store the digits of a registration number.

        Input with more than 10 digits is rejected and the previous value
        stays.

        Returns:
            True if stored
        """
        digits = digits_only(raw)
        if len(digits) > REGISTRATION_NUMBER_MAX_LENGTH:
            return False
        return self.form.professionals.update(professional_id, "registration_number", digits)

    def registration_number_error(self, professional_id: str) -> Optional[str]:
        """Advisory message for the field; never blocks typing."""
        professional = self.form.professionals.get(professional_id)
        if professional is None:
            return None
        return registration_number_hint(professional.registration_number)

    def registration_label(self, professional_id: str) -> str:
        """Registration authority (CRM, CRO, ...) for the row's profession."""
        professional = self.form.professionals.get(professional_id)
        if professional is None:
            return ""
        return authority_for(professional.profession)

    # ========== Procedures ==========

    def add_procedure(self) -> str:
        return self.form.procedures.add()

    def remove_procedure(self, procedure_id: str) -> bool:
        return self.form.procedures.remove(procedure_id)

    def update_procedure(self, procedure_id: str, field: str, value: str) -> bool:
        return self.form.procedures.update(procedure_id, field, value)

    # ========== Working hours ==========

    def update_schedule(self, day: str, field: str, value) -> None:
        self.form.schedule.update(day, field, value)

    # ========== Submission ==========

    @property
    def is_submitting(self) -> bool:
        return self.pipeline.is_submitting

    async def submit(self) -> SubmissionOutcome:
        """Submit the form; the lookup started before a reset is dropped."""
        outcome = await self.pipeline.submit(self.form)
        if outcome == SubmissionOutcome.SUCCESS:
            self._invalidate_lookups()
        return outcome

    async def close(self) -> None:
        """Wait for pending lookups and close both HTTP clients."""
        try:
            await self.wait_for_lookups()
        finally:
            try:
                await self.resolver.close()
            finally:
                await self.pipeline.intake.close()
