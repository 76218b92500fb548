import asyncio
import logging

from rocketchat_client import ClientOptions, RocketChatClient

async def main():
    logging.basicConfig(level=logging.DEBUG)

    options = ClientOptions(protocol="https", host="open.rocket.chat", port=443)
    async with RocketChatClient("demo-user", "demo-password", options) as client:
        # Verze serveru (přihlášení proběhne automaticky)
        error, version = await client.version()
        if error:
            print("Version failed:", error)
            return
        print("Version:", version)

        error, room = await client.create_room("playground")
        print("Create:", error or room)

        error, rooms = await client.get_public_rooms()
        print("Rooms:", error or rooms)

        if room:
            room_id = room["channel"]["_id"]
            await client.join_room(room_id)
            await client.send_msg(room_id, "Ahoj z Pythonu")
            print("Messages:", await client.get_unread_msg(room_id))
            await client.leave_room(room_id)

        await client.logout()

asyncio.run(main())
