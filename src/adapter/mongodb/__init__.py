USERS_COLLECTION_NAME = 'users'
APPOINTMENTS_COLLECTION_NAME = 'appointments'
