"""Doctor directory repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from mindful.domain.model.doctor import Doctor, DoctorConnection
from mindful.domain.value import DoctorId, UserId


class DoctorRepository(ABC):
    """Repository for the doctor directory."""

    @abstractmethod
    async def find_by_id(self, doctor_id: DoctorId) -> Optional[Doctor]:
        """Find a doctor by ID.

        Args:
            doctor_id: The doctor's unique identifier

        Returns:
            The doctor if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, specialization: Optional[str] = None) -> List[Doctor]:
        """Find doctors ordered by name.

        Args:
            specialization: Only return doctors with exactly this specialization

        Returns:
            List of doctors
        """
        pass

    @abstractmethod
    async def search(self, query: str) -> List[Doctor]:
        """Find doctors whose name or specialization contains ``query``.

        Matching is case-insensitive. Results are ordered by name.

        Args:
            query: Substring to look for

        Returns:
            Matching doctors
        """
        pass

    @abstractmethod
    async def save(self, doctor: Doctor) -> Doctor:
        """Insert a new doctor.

        Args:
            doctor: The doctor to save

        Returns:
            The saved doctor with its assigned ID
        """
        pass


class DoctorConnectionRepository(ABC):
    """Repository for connection requests between users and doctors."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[DoctorConnection]:
        """Find a user's connection requests, newest first.

        Args:
            user_id: The user's ID

        Returns:
            List of connection requests
        """
        pass

    @abstractmethod
    async def find_pending(
        self, user_id: UserId, doctor_id: DoctorId
    ) -> Optional[DoctorConnection]:
        """Find the user's pending request to a doctor, if any.

        Args:
            user_id: The user's ID
            doctor_id: The doctor's ID

        Returns:
            The pending request if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, connection: DoctorConnection) -> DoctorConnection:
        """Insert a new connection request.

        Args:
            connection: The request to save

        Returns:
            The saved request with its assigned ID
        """
        pass
