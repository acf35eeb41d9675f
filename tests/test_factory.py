from __future__ import annotations

import unittest

from notifications.channels import (
    DEMO_CHANNEL_ORDER,
    ChannelFactory,
    ChannelType,
    DefaultNotifier,
    EmailChannel,
    PushChannel,
    SmsChannel,
    SmsNotifier,
    create_channel,
    create_channels,
)


class CreateChannelTests(unittest.TestCase):
    def test_name_matches_enum_member_for_every_type(self) -> None:
        for channel_type in ChannelType:
            with self.subTest(channel_type=channel_type):
                self.assertEqual(create_channel(channel_type).name(), channel_type.name)

    def test_channel_notifier_pairing(self) -> None:
        expected = {
            ChannelType.EMAIL: (EmailChannel, DefaultNotifier),
            ChannelType.SMS: (SmsChannel, SmsNotifier),
            ChannelType.PUSH: (PushChannel, DefaultNotifier),
        }
        for channel_type, (channel_class, notifier_class) in expected.items():
            with self.subTest(channel_type=channel_type):
                channel = create_channel(channel_type)
                self.assertIs(type(channel), channel_class)
                self.assertIs(type(channel.notifier), notifier_class)

    def test_null_channel_type_raises_value_error(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            create_channel(None)

        self.assertEqual(str(ctx.exception), "ChannelType is null")

    def test_non_member_selector_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            create_channel("EMAIL")  # type: ignore[arg-type]

    def test_each_call_returns_a_new_instance(self) -> None:
        first = create_channel(ChannelType.EMAIL)
        second = create_channel(ChannelType.EMAIL)

        self.assertIsNot(first, second)
        self.assertIsNot(first.notifier, second.notifier)

    def test_class_entrypoint_matches_function(self) -> None:
        self.assertIsInstance(ChannelFactory.create(ChannelType.PUSH), PushChannel)


class CreateChannelsTests(unittest.TestCase):
    def test_one_channel_per_type_gives_three_distinct_variants(self) -> None:
        channels = create_channels(DEMO_CHANNEL_ORDER)

        self.assertEqual(len(channels), 3)
        self.assertEqual(
            [type(channel) for channel in channels],
            [EmailChannel, SmsChannel, PushChannel],
        )

    def test_null_in_sequence_raises(self) -> None:
        with self.assertRaises(ValueError):
            create_channels([ChannelType.SMS, None])


if __name__ == "__main__":
    unittest.main()
